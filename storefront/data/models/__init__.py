#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.user import RoleModel, UserModel, user_roles
from storefront.data.models.catalog import CategoryModel, InventoryModel, ProductModel
from storefront.data.models.review import ReviewModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.data.models.order_item import OrderItemModel

__all__ = [
    "RoleModel",
    "UserModel",
    "user_roles",
    "CategoryModel",
    "ProductModel",
    "InventoryModel",
    "ReviewModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderStatus",
    "OrderItemModel",
]
