from authcore.presentation.api.routers.accounts import router as accounts_router

__all__ = ["accounts_router"]
