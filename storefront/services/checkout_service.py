# storefront/services/checkout_service.py
import uuid

from storefront.data.database import Database
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import EmptyCart, MixedCurrencyCart
from storefront.domain.schemas import PaymentIn, ShippingIn
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.pricing import CheckoutLine, PricingPolicy, ZeroChargesPolicy
from storefront.utils.logging import get_logger
from storefront.utils.settings import DEFAULT_CURRENCY

logger = get_logger(__name__)


class CheckoutService:
    """
    Zamiana koszyka na zamowienie w jednej transakcji.

    Kolejnosc: blokada koszyka, odczyt pozycji, sumy, insert order,
    insert order_items, czyszczenie koszyka, commit. Dowolny blad
    w srodku cofa wszystkie zapisy.
    """

    def __init__(self, database: Database, pricing: PricingPolicy | None = None):
        self.database = database
        self.pricing = pricing or ZeroChargesPolicy()

    def checkout(
        self,
        user_id: uuid.UUID,
        shipping: ShippingIn | None = None,
        payment: PaymentIn | None = None,
    ) -> OrderModel:
        shipping = shipping or ShippingIn()
        payment = payment or PaymentIn()

        with self.database.transaction() as session:
            carts = CartRepo(session)
            orders = OrderRepo(session)

            cart = carts.get_cart_by_user(user_id, for_update=True)
            if not cart:
                logger.warning(f"Checkout rejected for user {user_id}: no cart")
                raise EmptyCart()

            lines = [
                CheckoutLine(
                    item_id=row.id,
                    product_id=row.product_id,
                    product_name=row.product_name,
                    sku=row.sku,
                    quantity=row.quantity,
                    unit_price_cents=row.unit_price_cents,
                    currency_code=row.currency_code,
                )
                for row in carts.get_checkout_lines(cart.id)
            ]

            if not lines:
                logger.warning(f"Checkout rejected for user {user_id}: cart {cart.id} is empty")
                raise EmptyCart()

            # koszyk jednowalutowy, waluta pierwszej pozycji jest wiazaca
            currency_code = lines[0].currency_code or DEFAULT_CURRENCY
            if any(line.currency_code != currency_code for line in lines):
                logger.warning(f"Checkout rejected for user {user_id}: mixed currencies in cart {cart.id}")
                raise MixedCurrencyCart()

            subtotal_cents = sum(line.line_total_cents for line in lines)
            charges = self.pricing.additional_charges(lines, subtotal_cents, currency_code)
            total_cents = subtotal_cents + charges.tax_cents + charges.shipping_cents

            order = orders.create_order(
                OrderModel(
                    user_id=user_id,
                    status=OrderStatus.PENDING.value,
                    subtotal_cents=subtotal_cents,
                    tax_cents=charges.tax_cents,
                    shipping_cents=charges.shipping_cents,
                    total_cents=total_cents,
                    currency_code=currency_code,
                    payment_provider=payment.provider or None,
                    payment_reference=payment.reference or None,
                    shipping_name=shipping.name or None,
                    shipping_address1=shipping.address1 or None,
                    shipping_address2=shipping.address2 or None,
                    shipping_city=shipping.city or None,
                    shipping_state=shipping.state or None,
                    shipping_postal_code=shipping.postal_code or None,
                    shipping_country=shipping.country or None,
                )
            )

            for line in lines:
                orders.add_order_item(
                    OrderItemModel(
                        order_id=order.id,
                        product_id=line.product_id,
                        product_name=line.product_name,
                        sku=line.sku,
                        quantity=line.quantity,
                        unit_price_cents=line.unit_price_cents,
                        currency_code=line.currency_code,
                        line_total_cents=line.line_total_cents,
                    )
                )

            # sam koszyk zostaje, usuwamy tylko pozycje
            carts.clear_cart_items(cart.id, [line.item_id for line in lines])

        logger.info(
            f"Order {order.id} created for user {user_id} from cart {cart.id}: "
            f"{len(lines)} items, total {total_cents} {currency_code}"
        )
        return order
