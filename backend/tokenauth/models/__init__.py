from tokenauth.models.user import User

__all__ = ["User"]
