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

"""Uniform access to the OpenStack objects a validator run creates.

Every service exposes one collection per resource type. A collection can
fetch a single object by id and delete it, and wraps what the python
clients return into a :class:`Resource` with the same small interface for
every type::

    gateway = Gateway.create_from_conf()
    server = gateway.compute.servers.get(server_id)
    server.wait_for(lambda s: s.ready())
    server.destroy()
"""

from cpi_validator.api import resource_types
from cpi_validator.common import cfg
from cpi_validator.common import logging
from cpi_validator.common import utils
from cpi_validator import exceptions
from cpi_validator import osclients


CONF = cfg.CONF
LOG = logging.getLogger(__name__)

# resource type -> (client name, client manager or neutron resource name)
COLLECTIONS = {
    "servers": ("nova", "servers"),
    "key_pairs": ("nova", "keypairs"),
    "flavors": ("nova", "flavors"),
    "networks": ("neutron", "network"),
    "routers": ("neutron", "router"),
    "subnets": ("neutron", "subnet"),
    "floating_ips": ("neutron", "floatingip"),
    "security_groups": ("neutron", "security_group"),
    "security_group_rules": ("neutron", "security_group_rule"),
    "ports": ("neutron", "port"),
    "images": ("glance", "images"),
    "volumes": ("cinder", "volumes"),
    "snapshots": ("cinder", "volume_snapshots"),
}

READY_STATUSES = {
    "servers": ("ACTIVE",),
    "volumes": ("AVAILABLE",),
}


def _http_status(exc):
    for attr in ("code", "http_status", "status_code"):
        status = getattr(exc, attr, None)
        if isinstance(status, int):
            return status
    return None


class Resource(object):
    """Live view of a single cloud object."""

    def __init__(self, collection, raw_resource):
        self.collection = collection
        self.raw_resource = raw_resource

    def _attr(self, name, default=None):
        if isinstance(self.raw_resource, dict):
            return self.raw_resource.get(name, default)
        return getattr(self.raw_resource, name, default)

    @property
    def resource_type(self):
        return self.collection.resource_type

    @property
    def id(self):
        return self._attr("id")

    @property
    def name(self):
        return self._attr("name")

    @property
    def status(self):
        return self._attr("status")

    @property
    def fault(self):
        return self._attr("fault", "n/a")

    def ready(self):
        ready_statuses = READY_STATUSES.get(self.resource_type, ())
        return utils.get_status(self.raw_resource) in ready_statuses

    def reload(self):
        """Fetch the current state of this object from the cloud."""
        resource = self.collection.get(self.id)
        if resource is None:
            raise exceptions.GetResourceNotFound(resource=self)
        return resource

    def wait_for(self, is_ready, timeout=None, check_interval=None):
        """Block until `is_ready` accepts the reloaded resource.

        :param is_ready: predicate taking a Resource
        :param timeout: seconds, defaults to
            [openstack]resource_ready_timeout
        :param check_interval: seconds, defaults to
            [openstack]resource_ready_poll_interval
        :returns: the ready Resource
        """
        if timeout is None:
            timeout = CONF.openstack.resource_ready_timeout
        if check_interval is None:
            check_interval = CONF.openstack.resource_ready_poll_interval
        return utils.wait_is_ready(self, is_ready,
                                   update_resource=lambda r: r.reload(),
                                   timeout=timeout,
                                   check_interval=check_interval)

    def destroy(self):
        return self.collection.delete(self.id)

    def __str__(self):
        return "%s %s (%s)" % (self.resource_type, self.name, self.id)


class Collection(object):
    """Objects of one resource type behind one python client."""

    def __init__(self, resource_type, client):
        self.resource_type = resource_type
        self.client = client

    def _show(self, resource_id):
        raise NotImplementedError()

    def _delete(self, resource_id):
        raise NotImplementedError()

    def get(self, resource_id):
        """Return the Resource with `resource_id` or None if it is gone."""
        try:
            raw_resource = self._show(resource_id)
        except Exception as e:
            if _http_status(e) == 404:
                return None
            raise exceptions.GetResourceFailure(
                resource="%s %s" % (self.resource_type, resource_id), err=e)
        return Resource(self, raw_resource)

    def delete(self, resource_id):
        """Delete the object, report whether the API accepted it."""
        try:
            self._delete(resource_id)
        except Exception as e:
            if _http_status(e) is None:
                raise
            LOG.warning("Deletion of %(type)s %(id)s refused: %(err)s"
                        % {"type": self.resource_type, "id": resource_id,
                           "err": e})
            return False
        return True


class ManagerCollection(Collection):
    """Collection backed by a nova, glance or cinder style manager."""

    def __init__(self, resource_type, client, manager):
        super(ManagerCollection, self).__init__(resource_type, client)
        self.manager = manager

    def _manager(self):
        return getattr(self.client, self.manager)

    def _show(self, resource_id):
        return self._manager().get(resource_id)

    def _delete(self, resource_id):
        self._manager().delete(resource_id)


class NeutronCollection(Collection):
    # neutronclient exposes show_<name>/delete_<name> returning dicts

    def __init__(self, resource_type, client, neutron_resource):
        super(NeutronCollection, self).__init__(resource_type, client)
        self.neutron_resource = neutron_resource

    def _show(self, resource_id):
        show = getattr(self.client, "show_%s" % self.neutron_resource)
        return show(resource_id)[self.neutron_resource]

    def _delete(self, resource_id):
        getattr(self.client, "delete_%s" % self.neutron_resource)(resource_id)


class Service(object):
    """Collections of the resource types one service owns."""

    def __init__(self, name, clients):
        self.name = name
        self.clients = clients

    def collection(self, resource_type):
        if (not resource_types.is_valid(resource_type) or
                resource_types.service_for(resource_type) != self.name):
            raise AttributeError("Service '%s' has no '%s' resources"
                                 % (self.name, resource_type))
        client_name, manager = COLLECTIONS[resource_type]
        client = getattr(self.clients, client_name)()
        if client_name == "neutron":
            return NeutronCollection(resource_type, client, manager)
        return ManagerCollection(resource_type, client, manager)

    def __getattr__(self, resource_type):
        if resource_type.startswith("_"):
            raise AttributeError(resource_type)
        return self.collection(resource_type)


class Gateway(object):
    """The four services resources are created in."""

    def __init__(self, clients):
        self.clients = clients
        self.compute = Service("compute", clients)
        self.network = Service("network", clients)
        self.image = Service("image", clients)
        self.volume = Service("volume", clients)

    @classmethod
    def create_from_conf(cls):
        return cls(osclients.Clients.create_from_conf())
