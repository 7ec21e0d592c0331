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

"""Static taxonomy of the OpenStack resources a validator run can create."""

import collections

from cpi_validator.common import utils
from cpi_validator import exceptions


class FlagPoll(object):
    """The resource reports readiness through its `ready()` flag."""

    def __call__(self, resource):
        return bool(resource.ready())

    def __str__(self):
        return "ready"


class StatusPoll(object):
    """The resource reports readiness through its status field."""

    def __init__(self, *ready_statuses, failure_statuses=("ERROR",)):
        self.ready_statuses = frozenset(s.upper() for s in ready_statuses)
        self.failure_statuses = frozenset(s.upper() for s in failure_statuses)

    def __call__(self, resource):
        status = utils.get_status(resource)
        if status in self.failure_statuses:
            raise exceptions.GetResourceErrorStatus(
                resource=resource, status=status,
                fault=getattr(resource, "fault", "n/a"))
        return status in self.ready_statuses

    def __str__(self):
        return ", ".join(sorted(self.ready_statuses))


RESOURCE_SERVICES = collections.OrderedDict([
    ("compute", ("servers", "key_pairs", "flavors")),
    ("network", ("networks", "routers", "subnets", "floating_ips",
                 "security_groups", "security_group_rules", "ports")),
    ("image", ("images",)),
    ("volume", ("volumes", "snapshots")),
])

# Types missing here are usable as soon as their create call returns.
READINESS = {
    "servers": FlagPoll(),
    "volumes": FlagPoll(),
    "networks": StatusPoll("ACTIVE"),
    "routers": StatusPoll("ACTIVE"),
    "ports": StatusPoll("ACTIVE", "DOWN"),
    "snapshots": StatusPoll("AVAILABLE"),
    "images": StatusPoll("ACTIVE"),
}

# Types whose cloud objects belong to the CPI and are destroyed through it.
CPI_DESTROYED = {
    "servers": "delete_vm",
    "images": "delete_stemcell",
}

LIGHT_STEMCELL_SUFFIX = " light"

_SERVICE_BY_TYPE = dict((resource_type, service)
                        for service, types in RESOURCE_SERVICES.items()
                        for resource_type in types)


class reference(str):
    """Identifier of something that is not a distinct cloud object.

    Returned by producers whose identifier only points at an existing
    object, e.g. a light stemcell pointing at a public image. Such
    identifiers are tracked and cleaned up like any other but never looked
    up while producing.
    """

    backed = False


def valid_types():
    """Return all resource type names in service declaration order."""
    return [resource_type
            for types in RESOURCE_SERVICES.values()
            for resource_type in types]


def is_valid(resource_type):
    return resource_type in _SERVICE_BY_TYPE


def service_for(resource_type):
    return _SERVICE_BY_TYPE[resource_type]


def strategy_for(resource_type):
    return READINESS.get(resource_type)


def is_backed(resource_type, resource_id):
    """Tell whether `resource_id` names an object the cloud tracks."""
    if not getattr(resource_id, "backed", True):
        return False
    if (resource_type == "images" and isinstance(resource_id, str) and
            resource_id.endswith(LIGHT_STEMCELL_SUFFIX)):
        return False
    return True
