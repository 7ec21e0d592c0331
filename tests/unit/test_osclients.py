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

import ddt

from cpi_validator import exceptions
from cpi_validator import osclients
from tests.unit import test


CREDENTIAL = {
    "auth_url": "https://keystone.example.com:5000/v3",
    "username": "validator",
    "password": "secret",
    "project_name": "cpi",
    "domain_name": None,
    "user_domain_name": "Default",
    "project_domain_name": "Default",
    "region_name": None,
    "endpoint_type": None,
    "https_insecure": False,
    "https_cacert": None,
}


@ddt.ddt
class ClientsTestCase(test.TestCase):

    def setUp(self):
        super(ClientsTestCase, self).setUp()
        self.clients = osclients.Clients(dict(CREDENTIAL))

    def test_create_from_conf(self):
        self.config.config(auth_url=CREDENTIAL["auth_url"],
                           username="validator", password="secret",
                           project_name="cpi", region_name="RegionOne",
                           group="openstack")

        clients = osclients.Clients.create_from_conf()

        expected = dict(CREDENTIAL, region_name="RegionOne")
        self.assertEqual(expected, clients.credential)

    def test_create_from_conf_missing_options(self):
        self.config.config(auth_url=CREDENTIAL["auth_url"],
                           group="openstack")

        exc = self.assertRaises(exceptions.InvalidConfigException,
                                osclients.Clients.create_from_conf)

        self.assertIn("username, password, project_name", str(exc))

    def test_unknown_client(self):
        self.assertRaises(AttributeError, getattr, self.clients, "heat")

    @mock.patch("keystoneauth1.session.Session")
    @mock.patch("keystoneauth1.identity.Password")
    def test_keystone_session(self, mock_password, mock_session):
        session = self.clients.keystone.get_session()

        self.assertEqual(mock_session.return_value, session)
        mock_password.assert_called_once_with(
            auth_url=CREDENTIAL["auth_url"], username="validator",
            password="secret", project_name="cpi",
            user_domain_name="Default", domain_name=None,
            project_domain_name="Default")
        mock_session.assert_called_once_with(
            auth=mock_password.return_value, verify=True, timeout=180.0)

        self.clients.keystone.get_session()
        self.assertEqual(1, mock_session.call_count)

    @mock.patch("keystoneauth1.session.Session")
    @mock.patch("keystoneauth1.identity.Password")
    def test_keystone_session_v2(self, mock_password, mock_session):
        self.clients.credential.update(
            auth_url="https://keystone.example.com:5000/v2.0",
            https_cacert="/etc/ssl/ca.pem")

        self.clients.keystone.get_session()

        mock_password.assert_called_once_with(
            auth_url="https://keystone.example.com:5000/v2.0",
            username="validator", password="secret", project_name="cpi")
        mock_session.assert_called_once_with(
            auth=mock_password.return_value, verify="/etc/ssl/ca.pem",
            timeout=180.0)

    def test_keystone_client(self):
        self.assertRaises(exceptions.ValidatorException,
                          self.clients.keystone)

    @mock.patch("novaclient.client.Client")
    @mock.patch("cpi_validator.osclients.Keystone.get_session")
    def test_nova(self, mock_keystone_get_session, mock_client):
        self.clients.credential.update(region_name="RegionOne",
                                       endpoint_type="internal")

        self.assertEqual(mock_client.return_value, self.clients.nova())
        self.assertEqual(mock_client.return_value, self.clients.nova())

        mock_client.assert_called_once_with(
            "2", http_log_debug=False,
            session=mock_keystone_get_session.return_value,
            region_name="RegionOne", interface="internal")

    @mock.patch("neutronclient.neutron.client.Client")
    @mock.patch("cpi_validator.osclients.Keystone.get_session")
    def test_neutron(self, mock_keystone_get_session, mock_client):
        self.clients.credential.update(endpoint_type="internal")

        self.assertEqual(mock_client.return_value, self.clients.neutron())

        mock_client.assert_called_once_with(
            "2.0", session=mock_keystone_get_session.return_value,
            endpoint_type="internal")

    @mock.patch("glanceclient.Client")
    @mock.patch("cpi_validator.osclients.Keystone.get_session")
    def test_glance(self, mock_keystone_get_session, mock_client):
        self.assertEqual(mock_client.return_value, self.clients.glance("1"))

        mock_client.assert_called_once_with(
            "1", session=mock_keystone_get_session.return_value)

    @mock.patch("cinderclient.client.Client")
    @mock.patch("cpi_validator.osclients.Keystone.get_session")
    def test_cinder(self, mock_keystone_get_session, mock_client):
        self.assertEqual(mock_client.return_value, self.clients.cinder())

        mock_client.assert_called_once_with(
            "3", http_log_debug=False,
            session=mock_keystone_get_session.return_value)
