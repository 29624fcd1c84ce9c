"""
Use Cases

Organized into domain folders:
- admin/: Workspace suspension and reactivation (billing integration)
- workspace_cleaner/: Scheduled cleanup of suspended workspaces

Import from subdirectories.
"""
