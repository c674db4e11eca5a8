# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Base test case that installs a fresh registry around every test."""

from __future__ import annotations

from contextlib import ExitStack

from standin.registry.context import use_registry
from standin.registry.registry import Registry


class StandinTestCase:
    """Base class for pytest test classes that inject substitutes.

    pytest calls ``setup_method``/``teardown_method`` around each test::

        class TestSignup(StandinTestCase):
            def test_sends_welcome_mail(self):
                mailer = substitute(Mailer)
                signup("ada@example.com")
                mailer.send.assert_called_once()
    """

    registry: Registry

    def setup_method(self, method: object = None) -> None:
        self._standin_stack = ExitStack()
        self.registry = self._standin_stack.enter_context(use_registry(Registry()))

    def teardown_method(self, method: object = None) -> None:
        self.registry.reset()
        self._standin_stack.close()
