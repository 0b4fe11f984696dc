"""Core access-control logic: roles, permissions, policy and navigation."""
