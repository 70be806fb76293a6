"""Store attendance kiosk package.

Feature modules (stores, employees, attendance, export, ...) follow the same
split: frozen dataclass models, repository protocols with MySQL
implementations, service use cases and a thin Flask controller layer.
"""
