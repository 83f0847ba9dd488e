from .account_controller import router as account_router


__all__ = ["account_router"]
