from storefront.services.token_service import TokenIdentity, TokenService

__all__ = ["TokenIdentity", "TokenService"]
