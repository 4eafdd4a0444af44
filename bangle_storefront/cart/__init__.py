"""
Cart package.
"""
from bangle_storefront.cart.cart import Cart, CartItem
