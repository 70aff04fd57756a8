"""
AvatarAPI - API Routers
=======================
"""
