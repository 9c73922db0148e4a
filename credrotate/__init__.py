"""
credrotate — rotate credential values stored in a 1Password vault.

Reads a batch of new credential values grouped by issuer, finds the vault
item each one belongs to, picks the concealed field that holds the secret,
and writes the new value back through the ``op`` CLI.
"""

__version__ = "0.1.0"
