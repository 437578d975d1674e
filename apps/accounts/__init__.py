"""
Accounts app - students, the fixed admin/guest role accounts, point balances,
ranks and the point reason catalog.
"""
