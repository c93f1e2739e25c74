"""HR Portal package.

Client-side data layer for the HR portal: a typed gateway to the remote
API, the session identity, a shared entity store and role-scoped views.
A thin Flask controller layer sits on top as the consumer.
"""
