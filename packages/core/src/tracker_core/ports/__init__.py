from .configuration import IConfiguration, ICustomFieldLookup, IProjectLookup

__all__ = [
    "IConfiguration",
    "ICustomFieldLookup",
    "IProjectLookup",
]
