"""
E-commerce domain: product catalog, orders and checkout.
"""
