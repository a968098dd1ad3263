"""Accounts, password login, session tokens and role-based access control."""
