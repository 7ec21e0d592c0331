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

import collections
import threading

from cpi_validator import api
from cpi_validator.api import gateway
from cpi_validator.api import resource_types
from cpi_validator.common import logging
from cpi_validator import exceptions
from cpi_validator import external_cpi


LOG = logging.getLogger(__name__)

TrackedResource = collections.namedtuple(
    "TrackedResource", ["type", "id", "logical_name"])


class ResourceTracker(object):
    """Keeps track of every cloud resource created during a validator run.

    Tests create resources through :meth:`produce` and look up resources
    created by other tests with :meth:`consumes`. At the end of the run
    :meth:`cleanup` destroys everything that was produced.
    """

    RESOURCE_SERVICES = resource_types.RESOURCE_SERVICES

    def __init__(self, resources, cpi_factory=None):
        """Create a tracker.

        :param resources: object exposing the `compute`, `network`, `image`
            and `volume` services, see gateway.Gateway
        :param cpi_factory: callable returning the CPI client used to delete
            servers and images, defaults to ExternalCpi.create_from_conf
        """
        self._resources = resources
        self._cpi_factory = (cpi_factory or
                             external_cpi.ExternalCpi.create_from_conf)
        self._tracked = []
        self._lock = threading.Lock()

    @classmethod
    def create(cls, resources=None):
        return cls(resources or gateway.Gateway.create_from_conf())

    def produce(self, resource_type, producer, provide_as=None):
        """Create a resource with `producer` and track it.

        :param resource_type: one of resource_types.valid_types()
        :param producer: callable creating the resource and returning its id
        :param provide_as: logical name other tests consume the resource
            by, defaults to `resource_type`
        :returns: the id returned by `producer`
        """
        if not resource_types.is_valid(resource_type):
            raise exceptions.InvalidResourceType(
                resource_type, resource_types.valid_types())

        resource_id = producer()
        tracked = TrackedResource(resource_type, resource_id,
                                  provide_as or resource_type)
        with self._lock:
            self._tracked.append(tracked)
        LOG.debug("Tracking %(type)s %(id)s as '%(name)s'"
                  % {"type": tracked.type, "id": tracked.id,
                     "name": tracked.logical_name})

        self._wait_for_resource(resource_type, resource_id)
        return resource_id

    def consumes(self, logical_name, message=None):
        """Return the id of the resource provided as `logical_name`.

        Skips the calling test if no such resource has been produced.
        """
        for tracked in reversed(self._tracked):
            if tracked.logical_name == logical_name:
                return tracked.id

        api.skip_test(message or "Required resource '%s' does not exist."
                      % logical_name)

    def count(self):
        return len(self._tracked)

    def cleanup(self):
        """Destroy every tracked resource.

        :returns: True if all resources were destroyed, False otherwise
        """
        LOG.info("Cleaning up %d tracked resources" % self.count())
        cpi = None
        success = True

        for tracked in self._tracked:
            if tracked.type in resource_types.CPI_DESTROYED:
                if cpi is None:
                    cpi = self._cpi_factory()
                destroyed = self._destroy_with_cpi(cpi, tracked)
            else:
                destroyed = self._destroy(tracked)

            if not destroyed:
                success = False

        LOG.info("Cleanup of %(count)d tracked resources %(result)s"
                 % {"count": self.count(),
                    "result": "succeeded" if success else "failed"})
        return success

    def resources(self):
        """Return the tracked resources that still exist in the cloud."""
        return [resource for _tracked, resource in self._live_resources()]

    def summary(self):
        """Describe the tracked resources that still exist in the cloud."""
        lines = ["  - %s: %s (%s)" % (tracked.type, resource.name, tracked.id)
                 for tracked, resource in self._live_resources()]
        if not lines:
            return "All resources have been cleaned up."
        return "\n".join(
            ["The following resources might not have been cleaned up:"] +
            lines)

    def _live_resources(self):
        for tracked in self._tracked:
            if not resource_types.is_backed(tracked.type, tracked.id):
                continue
            resource = self._get_resource(tracked.type, tracked.id)
            if resource is not None:
                yield tracked, resource

    def _get_resource(self, resource_type, resource_id):
        service = getattr(self._resources,
                          resource_types.service_for(resource_type))
        return getattr(service, resource_type).get(resource_id)

    def _wait_for_resource(self, resource_type, resource_id):
        is_ready = resource_types.strategy_for(resource_type)
        if is_ready is None:
            return
        if not resource_types.is_backed(resource_type, resource_id):
            LOG.debug("Not waiting for %(type)s %(id)s, it is a reference "
                      "to an existing object"
                      % {"type": resource_type, "id": resource_id})
            return

        resource = self._get_resource(resource_type, resource_id)
        if resource is None:
            raise exceptions.GetResourceNotFound(
                resource="%s %s" % (resource_type, resource_id))
        LOG.debug("Waiting for %(type)s %(id)s to become %(ready)s"
                  % {"type": resource_type, "id": resource_id,
                     "ready": is_ready})
        resource.wait_for(is_ready)

    def _destroy(self, tracked):
        resource = self._get_resource(tracked.type, tracked.id)
        if resource is None:
            LOG.debug("%(type)s %(id)s is already gone"
                      % {"type": tracked.type, "id": tracked.id})
            return True

        if resource.destroy():
            LOG.debug("Destroyed %(type)s %(id)s"
                      % {"type": tracked.type, "id": tracked.id})
            return True

        LOG.warning("Failed to destroy %(type)s %(id)s"
                    % {"type": tracked.type, "id": tracked.id})
        return False

    def _destroy_with_cpi(self, cpi, tracked):
        method = resource_types.CPI_DESTROYED[tracked.type]
        try:
            getattr(cpi, method)(tracked.id)
        except (exceptions.CpiError, exceptions.InvalidResponse,
                exceptions.NonExecutable) as e:
            LOG.warning("Failed to destroy %(type)s %(id)s with CPI "
                        "`%(method)s': %(err)s"
                        % {"type": tracked.type, "id": tracked.id,
                           "method": method, "err": e})
            if logging.is_debug():
                LOG.exception("CPI `%s' failed" % method)
            return False

        LOG.debug("Destroyed %(type)s %(id)s with CPI `%(method)s'"
                  % {"type": tracked.type, "id": tracked.id,
                     "method": method})
        return True
