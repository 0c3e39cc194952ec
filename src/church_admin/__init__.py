"""Church administration service.

This package is organized by feature modules (members, attendance, offerings,
prayer requests, admins, stats) with a thin Flask controller layer on top of
service/repository layers.
"""
