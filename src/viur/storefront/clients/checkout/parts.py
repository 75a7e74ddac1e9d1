"""
The billing and delivery address parts of the checkout address step.

Both take the address option of the customer from the request and store the
selected address in the basket:

- ``ca_billingoption`` / ``ca_deliveryoption``: ``"null"`` for a new address
  entered in the form, the id of an existing address of the customer, or
  ``"like"`` (delivery only) to ship to the billing address.
- ``ca_billing`` / ``ca_delivery``: the form values of a new address.
"""

import abc
import typing as t

from .address import get_customer
from ..abstract import ClientAbstract
from ...globals import STOREFRONT_LOGGER
from ...services import CLIENT_REGISTRY
from ...types import AddressType, ClientException

if t.TYPE_CHECKING:
    from ...view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

NEW_ADDRESS: t.Final[str] = "null"
"""Option value for an address entered in the form"""


class CheckoutAddressPartAbstract(ClientAbstract):
    address_type: t.ClassVar[AddressType]
    option_param: t.ClassVar[str]
    values_param: t.ClassVar[str]
    field_prefix: t.ClassVar[str]
    invalid_option_message: t.ClassVar[str]
    default_mandatory: t.ClassVar[tuple[str, ...]] = (
        "firstname", "lastname", "address1", "postal", "city", "languageid",
    )

    def get_body(self, uid: str = "") -> str:
        view = self.view
        view[f"{self.field_prefix}_body"] = self.render_sub_bodies(uid)
        return self.render_template("body")

    def process(self) -> None:
        super().process()
        view = self.view

        if (option := view.param(self.option_param)) in (None, ""):
            return

        controller = self.context.controller("basket")
        address = self.get_address(view, str(option))
        if address is None:
            logger.debug(f"Removing the {self.address_type.value} address from the basket")
            controller.delete_address(self.address_type)
        else:
            controller.add_address(self.address_type, address)
        controller.save()

    def get_address(self, view: "View", option: str) -> t.Any | None:
        """The address for ``option``, ``None`` to remove the address"""
        if option == NEW_ADDRESS:
            return self.get_form_address(view)
        if (address := self.get_customer_address(option)) is not None:
            return address
        raise ClientException(self.invalid_option_message)

    @abc.abstractmethod
    def get_customer_address(self, option: str) -> t.Any | None:
        """The stored customer address selected by ``option``, ``None`` if there is none"""
        ...

    def get_form_address(self, view: "View") -> dict[str, t.Any]:
        values = view.param(self.values_param) or {}
        if not isinstance(values, t.Mapping):
            raise ClientException(self.invalid_option_message)

        mandatory = view.config(
            f"client/html/{self.path}/mandatory",
            self.default_mandatory,
        )
        if missing := [name for name in mandatory if values.get(name) in (None, "")]:
            message = view.translate("client", "This field is mandatory")
            view[f"{self.field_prefix}_error"] = {name: message for name in missing}
            raise ClientException("At least one mandatory field is missing")

        return dict(values)


@CLIENT_REGISTRY.register("checkout/standard/address/billing")
class CheckoutAddressBilling(CheckoutAddressPartAbstract):
    address_type = AddressType.PAYMENT
    option_param = "ca_billingoption"
    values_param = "ca_billing"
    field_prefix = "billing"
    invalid_option_message = "Please select a valid billing address"
    default_mandatory = CheckoutAddressPartAbstract.default_mandatory + ("email",)
    template_body = "checkout/standard/address/billing/body.html"

    def get_customer_address(self, option: str) -> t.Any | None:
        customer = get_customer(self.context)
        if customer is None or str(customer.id) != option:
            return None
        return self.context.manager("order/base/address").create_item().copy_from(customer.payment_address)


@CLIENT_REGISTRY.register("checkout/standard/address/delivery")
class CheckoutAddressDelivery(CheckoutAddressPartAbstract):
    address_type = AddressType.DELIVERY
    option_param = "ca_deliveryoption"
    values_param = "ca_delivery"
    field_prefix = "delivery"
    invalid_option_message = "Please select a valid delivery address"
    template_body = "checkout/standard/address/delivery/body.html"

    def get_address(self, view: "View", option: str) -> t.Any | None:
        if option == "like":
            return None
        return super().get_address(view, option)

    def get_customer_address(self, option: str) -> t.Any | None:
        customer = get_customer(self.context)
        if customer is None:
            return None
        for address_id, address in customer.address_items.items():
            if str(address_id) == option:
                return self.context.manager("order/base/address").create_item().copy_from(address)
        return None
