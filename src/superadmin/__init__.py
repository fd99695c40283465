"""SuperAdmin portal RBAC: module registry, role visibility and permission checks."""
