"""Interactive adapter package.

Scope:
    Terminal front end over `witclient.Wit.message`. No library logic lives
    here; errors are caught per line and logged.
"""
