# Request authorization

from .admin import AdminDependency, optional_admin, require_admin

__all__ = ["AdminDependency", "optional_admin", "require_admin"]
