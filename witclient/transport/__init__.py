"""HTTP transport package.

Module split:
    - `client`: authenticated request execution and response normalization.
    - `payload`: field whitelisting and shape checks for mutating entity calls.
"""
