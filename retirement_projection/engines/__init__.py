from .decumulation import apply_decumulation, withdrawal_amount

__all__ = ["apply_decumulation", "withdrawal_amount"]
