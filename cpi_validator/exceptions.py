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


class ValidatorException(Exception):
    """Base CPI validator exception

    To correctly use this class, inherit from it and define
    a "msg_fmt" property. That msg_fmt will get printf'd
    with the keyword arguments provided to the constructor.

    """
    msg_fmt = "%(message)s"
    error_code = 100

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if "%(message)s" in self.msg_fmt:
            kwargs.update({"message": message})

        super(ValidatorException, self).__init__(self.msg_fmt % kwargs)

    def format_message(self):
        return str(self)


class InvalidArgumentsException(ValidatorException):
    error_code = 111
    msg_fmt = "Invalid arguments: '%(message)s'"


class InvalidResourceType(InvalidArgumentsException, ValueError):
    error_code = 112
    msg_fmt = "Invalid resource type '%(resource_type)s', use %(valid_types)s"

    def __init__(self, resource_type, valid_types):
        self.resource_type = resource_type
        self.valid_types = list(valid_types)
        super(InvalidResourceType, self).__init__(
            resource_type=resource_type,
            valid_types=", ".join(self.valid_types))


class InvalidConfigException(ValidatorException):
    error_code = 113
    msg_fmt = "This config is invalid: `%(message)s`"


class GetResourceFailure(ValidatorException):
    error_code = 214
    msg_fmt = "Failed to get the resource %(resource)s: %(err)s"


class GetResourceNotFound(GetResourceFailure):
    error_code = 215
    msg_fmt = "Resource %(resource)s is not found."


class GetResourceErrorStatus(GetResourceFailure):
    error_code = 216
    msg_fmt = "Resource %(resource)s has %(status)s status.\n Fault: %(fault)s"


class TimeoutException(ValidatorException):
    error_code = 240
    msg_fmt = ("Validator tired waiting %(timeout).2f seconds for "
               "%(resource_type)s %(resource_name)s:%(resource_id)s to "
               "become %(desired_status)s current status %(resource_status)s")


class CpiException(ValidatorException):
    error_code = 300
    msg_fmt = "CPI call failed: %(message)s"


class CpiError(CpiException):
    error_code = 301
    msg_fmt = ("CPI error '%(error_type)s' during `%(method)s': "
               "%(error_message)s")


class InvalidResponse(CpiException):
    error_code = 302
    msg_fmt = "Invalid response from CPI `%(method)s': %(message)s"


class NonExecutable(CpiException):
    error_code = 303
    msg_fmt = "CPI binary '%(path)s' is not executable."
