# Copyright 2014: Mirantis Inc.
# All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import abc

from cpi_validator.common import cfg
from cpi_validator.common import logging
from cpi_validator import exceptions


CONF = cfg.CONF
LOG = logging.getLogger(__name__)

_CLIENTS = {}


def configure(name, default_version=None):
    """OpenStack client class wrapper.

    Each client class has to be wrapped by configure() wrapper. It
    registers the class under `name` and sets its defaults.

    :param name: Name of the client
    :param default_version: Default API version for client
    """
    def wrapper(cls):
        cls._name = name
        cls._default_version = default_version
        _CLIENTS[name] = cls
        return cls

    return wrapper


class OSClient(object, metaclass=abc.ABCMeta):
    def __init__(self, credential, cache_obj):
        self.credential = credential
        self.cache = cache_obj

    @property
    def keystone(self):
        return _CLIENTS["keystone"](self.credential, self.cache)

    def _get_session(self):
        return self.keystone.get_session()

    def _client_kwargs(self, interface_key="interface"):
        kw = {"session": self._get_session()}
        if self.credential.get("region_name"):
            kw["region_name"] = self.credential["region_name"]
        if self.credential.get("endpoint_type"):
            kw[interface_key] = self.credential["endpoint_type"]
        return kw

    @abc.abstractmethod
    def create_client(self, version=None):
        """Create new instance of client."""

    def __call__(self, version=None):
        """Return initialized client instance."""
        key = "%s%s" % (self._name, version or "")
        if key not in self.cache:
            self.cache[key] = self.create_client(
                version or self._default_version)
        return self.cache[key]


@configure("keystone")
class Keystone(OSClient):

    def get_session(self):
        if "keystone_session" not in self.cache:
            from keystoneauth1 import identity
            from keystoneauth1 import session

            password_args = {
                "auth_url": self.credential["auth_url"],
                "username": self.credential["username"],
                "password": self.credential["password"],
                "project_name": self.credential["project_name"]
            }
            if "v2.0" not in password_args["auth_url"]:
                password_args.update({
                    "user_domain_name": self.credential["user_domain_name"],
                    "domain_name": self.credential["domain_name"],
                    "project_domain_name":
                        self.credential["project_domain_name"],
                })
            identity_plugin = identity.Password(**password_args)
            self.cache["keystone_session"] = session.Session(
                auth=identity_plugin,
                verify=(self.credential["https_cacert"] or
                        not self.credential["https_insecure"]),
                timeout=CONF.openstack.client_http_timeout)
        return self.cache["keystone_session"]

    def create_client(self, version=None):
        raise exceptions.ValidatorException(
            "Use get_session() to talk to keystone.")


@configure("nova", default_version="2")
class Nova(OSClient):
    def create_client(self, version=None):
        """Return nova client."""
        from novaclient import client as nova

        return nova.Client(version, http_log_debug=logging.is_debug(),
                           **self._client_kwargs())


@configure("neutron", default_version="2.0")
class Neutron(OSClient):
    def create_client(self, version=None):
        """Return neutron client."""
        from neutronclient.neutron import client as neutron

        return neutron.Client(
            version, **self._client_kwargs(interface_key="endpoint_type"))


@configure("glance", default_version="2")
class Glance(OSClient):
    def create_client(self, version=None):
        """Return glance client."""
        import glanceclient as glance

        return glance.Client(version, **self._client_kwargs())


@configure("cinder", default_version="3")
class Cinder(OSClient):
    def create_client(self, version=None):
        """Return cinder client."""
        from cinderclient import client as cinder

        return cinder.Client(
            version, http_log_debug=logging.is_debug(),
            **self._client_kwargs(interface_key="endpoint_type"))


class Clients(object):
    """This class simplify and unify work with OpenStack python clients."""

    def __init__(self, credential):
        self.credential = credential
        self.cache = {}

    def __getattr__(self, client_name):
        """Lazy load of clients."""
        try:
            client_cls = _CLIENTS[client_name]
        except KeyError:
            raise AttributeError(client_name)
        return client_cls(self.credential, self.cache)

    @classmethod
    def create_from_conf(cls):
        conf = CONF.openstack
        missing = [name for name in ("auth_url", "username", "password",
                                     "project_name")
                   if not getattr(conf, name)]
        if missing:
            raise exceptions.InvalidConfigException(
                "missing [openstack] options: %s" % ", ".join(missing))
        LOG.debug("Using OpenStack credentials of user %(user)s at %(url)s"
                  % {"user": conf.username, "url": conf.auth_url})
        return cls({
            "auth_url": conf.auth_url,
            "username": conf.username,
            "password": conf.password,
            "project_name": conf.project_name,
            "domain_name": conf.domain_name,
            "user_domain_name": conf.user_domain_name,
            "project_domain_name": conf.project_domain_name,
            "region_name": conf.region_name,
            "endpoint_type": conf.endpoint_type,
            "https_insecure": conf.https_insecure,
            "https_cacert": conf.https_cacert,
        })
