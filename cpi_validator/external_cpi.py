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

import json
import os
import subprocess

from cpi_validator.common import cfg
from cpi_validator.common import logging
from cpi_validator import exceptions


CONF = cfg.CONF
LOG = logging.getLogger(__name__)

CPI_LOG_NAME = "cpi.log"


class ExternalCpi(object):
    """Client of an external CPI executable.

    Every call spawns the executable, writes a JSON request to its stdin
    and reads the JSON response from its stdout::

        request:  {"method": "delete_vm", "arguments": ["vm-cid"],
                   "context": {"director_uuid": "validator"}}
        response: {"result": null, "error": null, "log": "..."}
    """

    def __init__(self, cpi_path, config_file=None, log_path=None,
                 director_uuid="validator", timeout=600.0):
        self.cpi_path = cpi_path
        self.config_file = config_file
        self.log_path = log_path
        self.director_uuid = director_uuid
        self.timeout = timeout

    @classmethod
    def create_from_conf(cls):
        if not CONF.cpi.path:
            raise exceptions.InvalidConfigException(
                "[cpi] path is required to call the CPI")
        return cls(CONF.cpi.path,
                   config_file=CONF.cpi.config_file,
                   log_path=CONF.cpi.log_path,
                   director_uuid=CONF.cpi.director_uuid,
                   timeout=CONF.cpi.call_timeout)

    def _command(self):
        cmd = [self.cpi_path]
        if self.config_file:
            cmd.append(self.config_file)
        return cmd

    def _write_log(self, method, log):
        if not (self.log_path and log):
            return
        with open(os.path.join(self.log_path, CPI_LOG_NAME), "a") as f:
            f.write("[%s] %s" % (method, log))
            if not log.endswith("\n"):
                f.write("\n")

    def call(self, method, *arguments):
        """Invoke `method` on the CPI and return its result.

        :raises NonExecutable: the CPI binary cannot be executed
        :raises InvalidResponse: the CPI did not answer with a valid response
        :raises CpiError: the CPI answered with an error
        """
        if not (os.path.isfile(self.cpi_path) and
                os.access(self.cpi_path, os.X_OK)):
            raise exceptions.NonExecutable(path=self.cpi_path)

        request = json.dumps({
            "method": method,
            "arguments": list(arguments),
            "context": {"director_uuid": self.director_uuid}})
        LOG.debug("Calling CPI `%(method)s' with %(args)s"
                  % {"method": method, "args": list(arguments)})

        try:
            proc = subprocess.Popen(self._command(), stdin=subprocess.PIPE,
                                    stdout=subprocess.PIPE,
                                    stderr=subprocess.PIPE,
                                    universal_newlines=True)
        except OSError as e:
            LOG.debug("Failed to start CPI %(path)s: %(err)s"
                      % {"path": self.cpi_path, "err": e})
            raise exceptions.NonExecutable(path=self.cpi_path) from e
        try:
            stdout, stderr = proc.communicate(request, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            raise exceptions.InvalidResponse(
                "no response within %.2f seconds" % self.timeout,
                method=method)
        self._write_log(method, stderr)

        try:
            response = json.loads(stdout)
        except ValueError as e:
            raise exceptions.InvalidResponse(
                "%s, output: %r" % (e, stdout), method=method)
        if not (isinstance(response, dict) and
                "result" in response and "error" in response):
            raise exceptions.InvalidResponse(
                "'result' and 'error' keys are required, got %r" % stdout,
                method=method)
        self._write_log(method, response.get("log"))

        error = response["error"]
        if error:
            if not isinstance(error, dict):
                error = {"message": str(error)}
            raise exceptions.CpiError(
                method=method,
                error_type=error.get("type", "Unknown"),
                error_message=error.get("message", ""))
        return response["result"]

    def delete_vm(self, vm_cid):
        return self.call("delete_vm", vm_cid)

    def delete_stemcell(self, stemcell_cid):
        return self.call("delete_stemcell", stemcell_cid)
