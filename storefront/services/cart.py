from typing import Sequence, Tuple
from storefront.schemas import GUEST, CartLine, Customer, OrderItem, OrderRequest, Product

Cart = Tuple[CartLine, ...]

def add_line(cart: Cart, product: Product) -> Cart:
    return cart + (CartLine.from_product(product),)

def remove_line(cart: Cart, index: int) -> Cart:
    """Drop the line at `index`. Out-of-range (incl. negative) leaves the cart as is."""
    if index < 0 or index >= len(cart):
        return cart
    return cart[:index] + cart[index + 1:]

def cart_total(lines: Sequence[CartLine]) -> float:
    return sum(line.price for line in lines)

def build_order(lines: Sequence[CartLine], customer: Customer = GUEST) -> OrderRequest:
    items = [
        OrderItem(
            product_id=line.product_id,
            title=line.title,
            price=line.price,
            quantity=1,
            size=line.sizes[0] if line.sizes else None,
            image=line.image,
        )
        for line in lines
    ]
    return OrderRequest(items=items, customer=customer, total=round(cart_total(lines), 2))
