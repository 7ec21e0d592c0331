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

OPTS = {"cpi": [
    cfg.StrOpt("path",
               help="Executable of the CPI under validation."),
    cfg.StrOpt("config_file",
               help="Configuration file passed to the CPI executable as its "
                    "only argument."),
    cfg.StrOpt("log_path",
               help="Directory where the log of every CPI call is appended "
                    "to cpi.log."),
    cfg.StrOpt("director_uuid",
               default="validator",
               help="Director UUID sent in the context of every CPI call."),
    cfg.FloatOpt("call_timeout",
                 default=600.0,
                 help="Maximum duration of a single CPI call in seconds."),
]}
