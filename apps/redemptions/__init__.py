"""
Redemptions app - spending points on products and the voucher lifecycle
(pending -> completed | cancelled) verified by staff through voucher codes.
"""
