from .users import User, USER_ROLES
from .catalog import Category, Product
from .customers import Customer
from .orders import Order, OrderItem, Payment
from .refunds import Refund, RefundItem
from .settings import Setting

__all__ = [
    'User', 'USER_ROLES',
    'Category', 'Product',
    'Customer',
    'Order', 'OrderItem', 'Payment',
    'Refund', 'RefundItem',
    'Setting',
]
