"""HR Records package.

Feature modules (auth, catalogs, accounts, roster, dashboard, card) each keep
a thin Flask controller on top of plain service classes that talk to a
table store.
"""
