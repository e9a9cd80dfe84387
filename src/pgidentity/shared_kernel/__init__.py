"""Shared Kernel module.

This module contains foundational components that are explicitly shared by
the database infrastructure and the identity context: the argument and
lookup exceptions every layer raises, and the observation context carried
by domain probes. Changes here affect every layer and should be carefully
coordinated.
"""
