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

from cpi_validator.common import cfg

OPTS = {"openstack": [
    cfg.StrOpt("auth_url",
               help="Keystone endpoint of the cloud under validation."),
    cfg.StrOpt("username",
               help="Name of the user the CPI and the validator act as."),
    cfg.StrOpt("password", secret=True,
               help="Password of the user."),
    cfg.StrOpt("project_name",
               deprecated_name="tenant_name",
               help="Project all resources are created in."),
    cfg.StrOpt("domain_name",
               help="Domain name used for keystone v3 authentication."),
    cfg.StrOpt("user_domain_name", default="Default",
               help="Domain of the user."),
    cfg.StrOpt("project_domain_name", default="Default",
               help="Domain of the project."),
    cfg.StrOpt("region_name",
               help="Region to look service endpoints up in."),
    cfg.StrOpt("endpoint_type",
               help="Endpoint interface, e.g. public or internal."),
    cfg.BoolOpt("https_insecure", default=False,
                help="Skip TLS certificate verification."),
    cfg.StrOpt("https_cacert",
               help="CA bundle used to verify TLS certificates."),
    cfg.FloatOpt("client_http_timeout",
                 default=180.0,
                 help="HTTP timeout for any of OpenStack service in seconds"),
    cfg.FloatOpt("resource_ready_timeout",
                 default=600.0,
                 help="Time to wait for a freshly created resource to "
                      "become ready."),
    cfg.FloatOpt("resource_ready_poll_interval",
                 default=2.0,
                 help="Interval between checks when waiting for a resource "
                      "to become ready."),
]}
