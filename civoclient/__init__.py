"""Client library for the Civo cloud API: quotas, regions, volumes, snapshots, teams, roles, SSH keys and webhooks."""

__version__ = "0.1.0"