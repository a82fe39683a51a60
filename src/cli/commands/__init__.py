"""Lifecycle command handlers grouped like the help catalogue.

- setup: init, build, up, down, restart, clean
- database: migrate, makemigrations, createsuperuser, seed-all, db-summary, dbshell, resetdb
- backend: shell, bash, logs, test
- auth: auth-logs, auth-bash, create-user
- frontend: front-logs, front-bash
- utility: ps, status, logs-all

Each handler takes a ``CLIContext`` and returns the process exit status.
"""
