"""
HTTP routers, one per server function group.
"""
