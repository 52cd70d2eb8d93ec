"""Role checks and role-filtered navigation tabs."""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from domain.models import CurrentUser
from domain.screens import TabId


@dataclass(frozen=True)
class NavItem:
    label: str
    value: TabId
    icon: str
    required_roles: Optional[Tuple[str, ...]] = None  # None: everyone
    any_role: bool = True  # False: user needs ALL required roles


ALL_NAV_ITEMS: List[NavItem] = [
    NavItem("Home", TabId.HOME, "🏠"),
    NavItem("Schedule", TabId.SCHEDULE, "📅"),
    NavItem("Teams", TabId.TEAMS, "👥"),
    NavItem("Ratings", TabId.RATINGS, "📈"),
    NavItem("Admin", TabId.ADMIN, "⚙️", required_roles=("admin",), any_role=False),
    NavItem("More", TabId.MORE, "☰"),
]


def has_roles(user: Optional[CurrentUser], any_of: Iterable[str] = (), all_of: Iterable[str] = ()) -> bool:
    if user is None:
        return False
    any_of, all_of = list(any_of), list(all_of)
    if any_of and not any(r in user.roles for r in any_of):
        return False
    if all_of and not all(r in user.roles for r in all_of):
        return False
    return True


def visible_nav_items(user: Optional[CurrentUser]) -> List[NavItem]:
    """Tabs for the shell: public ones always, role-gated ones when the user qualifies.

    More stays last regardless of which role-gated tabs are present.
    """
    items = []
    for item in ALL_NAV_ITEMS:
        if not item.required_roles:
            items.append(item)
        elif item.any_role and has_roles(user, any_of=item.required_roles):
            items.append(item)
        elif not item.any_role and has_roles(user, all_of=item.required_roles):
            items.append(item)
    items.sort(key=lambda i: i.value == TabId.MORE)
    return items
