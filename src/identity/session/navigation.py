"""Navigation gating derived from the session state.

Pure decisions only: which route a signed-in user lands on, and whether a
protected route renders, waits for the session to settle, or redirects.
"""

from dataclasses import dataclass
from enum import Enum

from identity.session.state import SessionState
from identity.shared.role import UserRole


class Routes:
    HOME = "/"
    LOGIN = "/auth"
    UNAUTHORIZED = "/unauthorized"
    CUSTOMER_DASHBOARD = "/customer-dashboard"
    SUPPLIER_DASHBOARD = "/supplier-dashboard"
    ADMIN_DASHBOARD = "/admin-dashboard"


ROLE_DASHBOARDS = {
    UserRole.ADMIN: Routes.ADMIN_DASHBOARD,
    UserRole.SUPPLIER: Routes.SUPPLIER_DASHBOARD,
    UserRole.CUSTOMER: Routes.CUSTOMER_DASHBOARD,
}


class RouteAction(Enum):
    RENDER = "render"
    WAIT = "wait"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class RouteDecision:
    action: RouteAction
    target: str | None = None

    @classmethod
    def render(cls):
        return cls(RouteAction.RENDER)

    @classmethod
    def wait(cls):
        return cls(RouteAction.WAIT)

    @classmethod
    def redirect(cls, target):
        return cls(RouteAction.REDIRECT, target)


def landing_route(state: SessionState, fallback: str = Routes.HOME) -> RouteDecision:
    """Where to send a user arriving at the dashboard entry point."""
    if state.loading:
        return RouteDecision.wait()
    if not state.is_authenticated:
        return RouteDecision.redirect(Routes.LOGIN)
    return RouteDecision.redirect(ROLE_DASHBOARDS.get(state.role, fallback))


def guard_route(
    state: SessionState,
    required_role: UserRole | None = None,
    require_auth: bool = True,
    redirect_to: str = Routes.LOGIN,
    check_supplier_approval: bool = False,
    supplier_approved: bool | None = None,
) -> RouteDecision:
    """Decide whether a protected route may render.

    ``supplier_approved`` is the supplier's active-and-verified status when
    ``check_supplier_approval`` is set; ``None`` means it is still loading.
    """
    checking_supplier = check_supplier_approval and state.role is UserRole.SUPPLIER

    if state.loading or (checking_supplier and supplier_approved is None):
        return RouteDecision.wait()

    if state.is_authenticated and state.role is None and required_role is not None:
        return RouteDecision.wait()

    if require_auth and not state.is_authenticated:
        return RouteDecision.redirect(redirect_to)

    if checking_supplier and not supplier_approved:
        return RouteDecision.redirect(Routes.SUPPLIER_DASHBOARD)

    if required_role is not None and state.role is not required_role:
        return RouteDecision.redirect(ROLE_DASHBOARDS.get(state.role, Routes.UNAUTHORIZED))

    return RouteDecision.render()


def can_view(state: SessionState, allowed_roles) -> bool:
    """Whether role-restricted content is shown; hidden while loading."""
    if state.loading or state.role is None:
        return False
    return state.role in allowed_roles
