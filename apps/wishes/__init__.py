"""
Wishes app - students ask for new catalog items, one wish per cooldown
window, and like each other's wishes.
"""
