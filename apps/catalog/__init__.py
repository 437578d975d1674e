"""
Catalog app - products, product categories, stock levels and the
promotional banner carousel.
"""
