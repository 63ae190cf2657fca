from __future__ import annotations

from typing import Iterator

import pytest

from workspace_rbac.security import MembershipContext


@pytest.fixture(autouse=True)
def _clear_membership_context() -> Iterator[None]:
    MembershipContext.clear()
    yield
    MembershipContext.clear()
