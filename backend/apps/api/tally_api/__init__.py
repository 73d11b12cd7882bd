"""
Tally API application.

HTTP surface for unread statistics and feed maintenance.
"""
