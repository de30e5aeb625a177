"""Resource namespaces shared by the sync and async clients."""

from .carts import CartsNamespace
from .composite import CompositeNamespace, MetricsNamespace
from .content import ContentNamespace
from .experience import ExperienceNamespace
from .locations import LocationsNamespace
from .organizations import OrganizationsNamespace
from .search import LocatorNamespace, SearchNamespace

__all__ = [
    "CartsNamespace",
    "CompositeNamespace",
    "ContentNamespace",
    "ExperienceNamespace",
    "LocationsNamespace",
    "LocatorNamespace",
    "MetricsNamespace",
    "OrganizationsNamespace",
    "SearchNamespace",
]
