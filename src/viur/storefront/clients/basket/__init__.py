from .standard import BasketStandard, get_attribute_map  # noqa
