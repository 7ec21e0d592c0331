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

from unittest import mock

from cpi_validator.cfg import cpi
from cpi_validator.cfg import openstack
from cpi_validator.common import logging
from cpi_validator.common import opts
from tests.unit import test


class OptsTestCase(test.TestCase):

    def test_list_opts(self):
        merged = dict(opts.list_opts())

        self.assertEqual(logging.DEBUG_OPTS, merged["DEFAULT"])
        self.assertEqual(openstack.OPTS["openstack"], merged["openstack"])
        self.assertEqual(cpi.OPTS["cpi"], merged["cpi"])

    @mock.patch("cpi_validator.common.opts.CONF")
    def test_register_opts(self, mock_conf):
        opts.register_opts([("DEFAULT", ["default_opt"]),
                            ("cpi", ["cpi_opt"])])

        mock_conf.register_opts.assert_has_calls([
            mock.call(["default_opt"]),
            mock.call(["cpi_opt"], group=mock.ANY)])
        self.assertEqual(1, mock_conf.register_group.call_count)

    @mock.patch("cpi_validator.common.opts.register_opts")
    def test_register(self, mock_register_opts):
        with mock.patch.object(opts, "_registered", False):
            opts.register()
            opts.register()

        mock_register_opts.assert_called_once_with(mock.ANY)

    def test_defaults(self):
        self.assertEqual(600.0, opts.CONF.openstack.resource_ready_timeout)
        self.assertEqual(2.0,
                         opts.CONF.openstack.resource_ready_poll_interval)
        self.assertEqual("validator", opts.CONF.cpi.director_uuid)
