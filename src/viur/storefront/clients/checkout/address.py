import threading
import typing as t

import cachetools
from deprecated.sphinx import deprecated

from ..abstract import ClientAbstract
from ...globals import STOREFRONT_LOGGER
from ...services import CLIENT_REGISTRY
from ...types import ControllerException, DomainException

if t.TYPE_CHECKING:
    from ...context import Context
    from ...view import View

logger = STOREFRONT_LOGGER.getChild(__name__)

STEP: t.Final[str] = "address"
"""Name of this checkout step"""

EXTRA_SESSION_KEY: t.Final[str] = "storefront/checkout/address/extra"
"""Session key of the additional address step values (``ca_extra``)"""

language_cache = cachetools.TTLCache(maxsize=256, ttl=3600)
lock_language_cache = threading.Lock()


@cachetools.cached(
    cache=language_cache,
    key=lambda context: cachetools.keys.hashkey(context.locale.site_code),
    lock=lock_language_cache,
)
def get_languages(context: "Context") -> dict[str, str]:
    """Languages of the enabled locales of the site"""
    return {
        locale_item.language_id: locale_item.language_id
        for locale_item in context.manager("locale").search(enabled_only=True)
    }


@deprecated(
    reason="Use common/countries and common/states instead",
    version="0.2.0",
)
def get_legacy_address_setting(view: "View", name: str) -> list[str]:
    """Countries or states from the old address step configuration"""
    return view.config(f"client/html/checkout/standard/address/{name}", [])


def get_address_setting(view: "View", name: t.Literal["countries", "states"]) -> list[str]:
    config = view.context.config
    if config.has(f"common/{name}"):
        return config.get(f"common/{name}")
    if config.has(f"client/html/checkout/standard/address/{name}"):
        return get_legacy_address_setting(view, name)
    return []


def get_customer(context: "Context") -> t.Any | None:
    """The customer account of the current user with its addresses

    ``None`` if nobody is logged in or the account does not exist (anymore).
    """
    if context.user_id is None:
        return None
    try:
        return context.controller("customer").get(context.user_id, domains=("customer/address",))
    except (ControllerException, DomainException) as exc:
        logger.debug(f"No customer account for user {context.user_id!r}: {exc}")
        return None


@CLIENT_REGISTRY.register("checkout/standard/address")
class CheckoutAddress(ClientAbstract):
    """
    The address step of the checkout.

    Consists of the billing and the delivery address sub-clients. The step is
    only rendered if it is the active checkout step, or if it is shown
    together with the active step on one page
    (``client/html/checkout/standard/onepage``).
    """

    default_subparts = ("billing", "delivery")
    template_body = "checkout/standard/address/body.html"

    def is_active(self, step: str | None) -> bool:
        onepage = self.view.config("client/html/checkout/standard/onepage", [])
        return step == STEP or (STEP in onepage and step in onepage)

    def get_body(self, uid: str = "") -> str:
        view = self.view
        if not self.is_active(view.get("standard_step_active", STEP)):
            return ""

        self.populate(view)
        view["address_body"] = self.render_sub_bodies(uid)
        return self.render_template("body")

    def get_header(self, uid: str = "") -> str:
        if not self.is_active(self.view.get("standard_step_active")):
            return ""
        return super().get_header(uid)

    def process(self) -> None:
        view = self.view
        try:
            super().process()

            if (extra := view.param("ca_extra")) is not None:
                self.context.session[EXTRA_SESSION_KEY] = dict(extra) if isinstance(extra, t.Mapping) else extra

            basket = self.context.controller("basket").get()
            if "standard_step_active" not in view and len(basket.addresses) == 0:
                view["standard_step_active"] = STEP
        except Exception:
            view["standard_step_active"] = STEP
            raise

    def add_data(self, view: "View") -> "View":
        context = self.context

        if (customer := get_customer(context)) is not None:
            manager = context.manager("order/base/address")
            view["address_customer_item"] = customer
            view["address_payment_item"] = manager.create_item().copy_from(customer.payment_address)
            view["address_delivery_items"] = {
                address_id: manager.create_item().copy_from(address)
                for address_id, address in customer.address_items.items()
            }

        view["address_languages"] = get_languages(context)
        view["address_countries"] = get_address_setting(view, "countries")
        view["address_states"] = get_address_setting(view, "states")
        view["address_extra"] = context.session.get(EXTRA_SESSION_KEY, {})

        return super().add_data(view)
