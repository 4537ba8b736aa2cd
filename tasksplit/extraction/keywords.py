"""Keyword tables driving classification, titles and summaries.

All tables are tuples: lookups iterate them in declared order and the first
match wins, so the order of entries is part of the behaviour.
"""

from __future__ import annotations

ACTION_KEYWORDS: tuple[str, ...] = (
    "implement", "create", "add", "build", "develop", "design", "update", "modify",
    "change", "fix", "resolve", "remove", "delete", "rename", "replace", "integrate",
    "connect", "configure", "set", "enable", "disable", "show", "display", "hide",
    "navigate", "redirect", "link", "button", "click", "select", "choose", "confirm",
    "verify", "check", "validate", "test", "debug", "investigate", "analyze", "review",
    "improve", "optimize", "enhance", "upgrade", "migrate", "deploy", "install", "setup",
    "insert", "append", "attach", "include", "incorporate", "merge", "combine", "unify",
    "standardize", "normalize", "format", "structure", "organize", "arrange", "sort",
    "filter", "search", "find", "locate", "identify", "detect", "monitor", "track", "log",
    "record", "save", "export", "import", "download", "upload", "sync", "backup",
    "restore", "recover", "reset", "initialize", "start", "stop", "pause", "resume",
    "cancel", "abort", "terminate", "close", "open", "launch", "execute", "run",
    "perform", "process", "handle", "manage", "control", "operate", "maintain",
    "support", "assist", "help", "guide", "tutorial", "document",
)

FEATURE_KEYWORDS: tuple[str, ...] = (
    "feature", "function", "functionality", "capability", "component", "module",
    "system", "service", "interface", "api", "endpoint", "dashboard", "view", "page",
    "screen", "panel", "widget", "chart", "graph", "visualization", "report", "summary",
    "overview", "statistics", "analytics", "monitoring", "tracking", "logging",
    "notification", "alert", "warning", "message", "popup", "modal", "dialog", "form",
    "input", "field", "button", "link", "menu", "navigation", "sidebar", "header",
    "footer", "toolbar", "ribbon", "tab", "accordion", "dropdown", "select", "checkbox",
    "radio", "slider", "progress", "loading", "spinner", "indicator", "badge", "label",
    "tooltip", "help", "guide", "tutorial", "documentation", "manual", "faq", "support",
    "contact", "feedback", "rating", "review", "comment", "note", "annotation",
    "bookmark", "favorite", "share", "export", "import", "sync", "backup", "restore",
    "settings", "configuration", "preferences", "profile", "account", "user", "role",
    "permission", "security", "authentication", "authorization", "login", "logout",
    "register", "signup", "password", "token", "session", "cookie", "cache", "storage",
    "database", "table", "record", "entry", "item", "object", "entity", "model",
    "schema", "structure", "compliance", "matrix", "query", "edit", "regulation",
    "policy", "standard", "audit", "validation", "certification", "governance", "risk",
    "control", "re-gen", "regeneration", "topic", "content", "valid option",
    "showsendbtn", "boolean", "property", "setting", "parameter", "flag", "toggle",
    "switch", "config", "data source", "datasource", "data management", "data view",
    "view only", "data access", "data control", "data restriction", "data permission",
    "user management", "user admin", "user profile", "user settings", "user account",
    "non-cmp", "cmp", "rbac", "role-based", "access control",
)

ISSUE_KEYWORDS: tuple[str, ...] = (
    "bug", "error", "issue", "problem", "defect", "fault", "failure", "crash", "hang",
    "freeze", "slow", "performance", "lag", "delay", "timeout", "deadlock", "race",
    "conflict", "collision", "duplicate", "inconsistent", "invalid", "incorrect",
    "wrong", "missing", "empty", "null", "undefined", "exception", "throw", "catch",
    "handle", "recover", "fallback", "alternative", "workaround", "fix", "patch",
    "hotfix", "update", "upgrade", "migration", "compatibility", "deprecated",
    "obsolete", "legacy", "old", "outdated", "broken", "damaged", "corrupted",
    "unstable", "unreliable", "insecure", "vulnerable", "exposed", "leak", "overflow",
    "underflow", "memory", "cpu", "disk", "network", "bandwidth", "latency",
    "throughput", "capacity", "limit", "quota", "threshold", "boundary", "constraint",
    "restriction", "block", "prevent", "deny", "reject", "unauthorized", "forbidden",
    "not found", "absent", "gone", "deleted", "removed", "archived", "hidden",
    "private", "confidential", "sensitive", "secret",
)

PRIORITY_KEYWORDS: tuple[str, ...] = (
    "urgent", "critical", "high", "medium", "low", "priority", "important", "essential",
    "required", "mandatory", "necessary", "vital", "crucial", "key", "major", "minor",
    "trivial", "nice to have", "optional", "recommended", "suggested", "proposed",
    "planned", "scheduled", "timeline", "deadline", "milestone", "deliverable",
    "release", "version", "iteration", "sprint", "phase", "stage", "blocker",
    "showstopper", "p0", "p1", "p2", "p3", "p4", "p5", "severe", "moderate", "light",
)

# Declared order is the match priority.
MODULE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Compliance", (
        "compliance", "matrix", "query", "edit", "regulation", "policy", "standard",
        "audit", "validation", "certification", "governance", "risk", "control",
    )),
    ("User Management", (
        "user", "management", "role", "permission", "access", "control", "rbac",
        "user management", "user admin", "user profile", "user settings",
        "user account", "non-cmp", "cmp",
    )),
    ("Data Source", (
        "data source", "datasource", "data management", "data view", "view only",
        "data access", "data control", "data restriction", "data permission",
    )),
    ("Configuration", (
        "config", "configuration", "option", "valid option", "showsendbtn", "boolean",
        "property", "setting", "parameter", "flag", "toggle", "switch",
    )),
    ("Content Management", (
        "content", "topic", "re-gen", "regeneration", "content management",
        "content generation", "topic generation", "content update", "content refresh",
    )),
    ("Frontend", (
        "ui", "ux", "interface", "client", "browser", "react", "vue", "angular",
        "component", "page", "screen", "view", "layout", "design", "css", "html",
        "javascript", "typescript", "frontend", "client-side",
    )),
    ("Backend", (
        "api", "server", "backend", "service", "controller", "route", "endpoint",
        "database", "model", "schema", "query", "sql", "nosql", "mongodb", "mysql",
        "postgresql", "node", "express", "python", "java", "php",
    )),
    ("Database", (
        "database", "db", "table", "schema", "migration", "query", "sql", "nosql",
        "mongodb", "mysql", "postgresql", "redis", "index", "constraint", "foreign key",
        "primary key", "relationship",
    )),
    ("Testing", (
        "test", "testing", "unit", "integration", "e2e", "end-to-end", "spec", "jest",
        "mocha", "cypress", "selenium", "coverage", "mock", "stub", "fixture",
    )),
    ("Security", (
        "security", "auth", "authentication", "authorization", "login", "logout",
        "password", "token", "jwt", "oauth", "encryption", "hash", "bcrypt", "ssl",
        "https", "vulnerability", "xss", "csrf", "sql injection",
    )),
    ("DevOps", (
        "deploy", "deployment", "ci", "cd", "pipeline", "docker", "kubernetes", "aws",
        "azure", "gcp", "server", "infrastructure", "monitoring", "logging", "alert",
        "backup", "restore",
    )),
    ("UI/UX", (
        "ui", "ux", "design", "user experience", "interface", "wireframe", "prototype",
        "mockup", "user flow", "interaction", "usability", "accessibility",
        "responsive", "mobile", "desktop",
    )),
)

MODULE_LABELS: tuple[str, ...] = tuple(label for label, _ in MODULE_KEYWORDS)
