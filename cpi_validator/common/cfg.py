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

# NOTE: keep the oslo_config surface in one place so the rest of the code
#   never imports it directly.

from oslo_config import cfg
from oslo_config import fixture  # noqa


CONF = cfg.CONF

# option types
OptGroup = cfg.OptGroup
BoolOpt = cfg.BoolOpt
FloatOpt = cfg.FloatOpt
StrOpt = cfg.StrOpt
