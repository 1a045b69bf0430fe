from filmdb.services.schemas.films import (
    FilmRead,
    FilmCreate,
    FilmUpdate,
    FilmPage,
    DirectorsUpdate,
)
from filmdb.services.schemas.people import (
    PersonRead,
    PersonCreate,
    PersonUpdate,
    PersonPage,
)
from filmdb.services.schemas.roles import (
    RoleRead,
    RoleCreate,
    RoleUpdate,
    CastMemberIn,
    CastUpdate,
)

__all__ = [
    "FilmRead",
    "FilmCreate",
    "FilmUpdate",
    "FilmPage",
    "DirectorsUpdate",
    "PersonRead",
    "PersonCreate",
    "PersonUpdate",
    "PersonPage",
    "RoleRead",
    "RoleCreate",
    "RoleUpdate",
    "CastMemberIn",
    "CastUpdate",
]
