from apps.storefront.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
