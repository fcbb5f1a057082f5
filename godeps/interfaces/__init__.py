from .query import IPackageQuery

__all__ = ["IPackageQuery"]
