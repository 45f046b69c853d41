"""Filter semantics for in-memory evaluation and remote translation."""

# Rule names for reference in tests, capabilities and audit
RULE_CASE_INSENSITIVE = "comparisons: record value and filter value compared as lower-cased text"
RULE_BLANK_NEVER_MATCHES = "blank record values never match, including not_equals/not_contains"
RULE_EMPTY_OPERATORS = "is_empty/is_not_empty: judged by truthiness; no value required"
RULE_UNKNOWN_OPERATOR = "unknown operator: condition never matches"
RULE_GROUP_DEFAULT_AND = "group: conditions combine with AND unless operator/logicalOperator says otherwise"
RULE_TOP_LEVEL_DEFAULT_OR = "filter: groups combine with OR unless groupOperator says otherwise"
RULE_NO_GROUPS_KEEPS_ALL = "filter: no groups means every record is kept"
RULE_REMOTE_FIRST_GROUP_ONLY = "remote: only the first group is translated, predicates joined with AND"
RULE_REMOTE_SUPERSET_PUSHDOWN = "remote: pushed down only when remote rows are a superset; always re-checked in memory"

ALL_RULES = (
    RULE_CASE_INSENSITIVE,
    RULE_BLANK_NEVER_MATCHES,
    RULE_EMPTY_OPERATORS,
    RULE_UNKNOWN_OPERATOR,
    RULE_GROUP_DEFAULT_AND,
    RULE_TOP_LEVEL_DEFAULT_OR,
    RULE_NO_GROUPS_KEEPS_ALL,
    RULE_REMOTE_FIRST_GROUP_ONLY,
    RULE_REMOTE_SUPERSET_PUSHDOWN,
)
