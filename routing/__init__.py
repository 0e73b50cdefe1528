#Marks routing as a package.
#Re-exports the public graph API so other modules import from routing
#without knowing internal file names.
#No business logic.

from .graph import LocationGraph
from .models import Location, RouteResult

__all__ = [
           "LocationGraph",
             "Location",
             "RouteResult",
             ]
