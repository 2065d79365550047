"""
Use Cases

Organized into domain folders:
- auth/: Login realms, admin sessions, password reset
- features/: Effective feature flags
- billing/: Addon pricing and tier catalog
- elected_officials/: Invitations and menu permissions
- contributions/: Public ideas, incidents and tracking
- tenants/: Superadmin tenant moderation

Import from subdirectories.
"""
