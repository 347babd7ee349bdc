"""
config-complete Settings Module

Settings of the configuration accessor and their loading from the
environment.

Author: config-complete Project
License: MIT
"""
