from pizzeria.domain.principal.value_objects.address import Address

__all__ = ["Address"]
