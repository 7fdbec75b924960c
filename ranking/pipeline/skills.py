"""Skill lexicon matching and must/nice requirement classification."""

import re
from functools import lru_cache

SUBSTRING = "substring"
WORD = "word"
MATCH_MODES = (SUBSTRING, WORD)

JD_TERMS_LIMIT = 25
MIN_JD_TERM_LEN = 3

SKILL_LEXICON = [
    "python", "java", "c", "c++", "c#", "go", "golang", "rust", "scala", "kotlin",
    "swift", "objective-c", "javascript", "typescript", "ruby", "php", "perl",
    "matlab", "r", "sas", "stata", "julia", "sql", "pl/sql", "t-sql", "nosql",
    "html", "css", "sass", "less", "json", "xml", "yaml", "graphql", "rest", "grpc",
    "api", "microservices", "soa", "oop", "design patterns", "clean architecture",
    "react", "react.js", "angular", "vue", "svelte", "next.js", "nuxt", "node.js",
    "nodejs", "express", "nestjs", "django", "flask", "fastapi", "spring", "spring boot",
    "asp.net", ".net", "entity framework", "laravel", "rails", "ruby on rails",
    "gin", "echo", "fiber", "wails", "electron", "qt",
    "android", "ios", "react native", "flutter", "xamarin", "cordova",
    "aws", "amazon web services", "azure", "gcp", "google cloud", "oracle cloud",
    "docker", "kubernetes", "helm", "terraform", "ansible", "chef", "puppet",
    "jenkins", "github actions", "gitlab ci", "circleci", "ci/cd", "devops",
    "linux", "windows", "macos", "bash", "powershell", "shell scripting",
    "git", "svn", "mercurial",
    "postgresql", "mysql", "mariadb", "sql server", "oracle", "sqlite", "mongodb",
    "cassandra", "redis", "dynamodb", "elasticsearch", "opensearch", "neo4j",
    "snowflake", "bigquery", "redshift", "databricks",
    "kafka", "rabbitmq", "activemq", "nats", "sqs", "pubsub",
    "spark", "hadoop", "hive", "pig", "airflow", "dbt", "etl", "elt", "data pipeline",
    "data warehouse", "data lake", "data modeling", "data governance",
    "machine learning", "deep learning", "nlp", "computer vision", "llm",
    "data analysis", "data analytics", "data science", "statistics",
    "feature engineering", "modeling", "forecasting", "recommendation systems",
    "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch", "keras", "xgboost",
    "lightgbm", "catboost", "mlops", "model deployment", "onnx",
    "excel", "power bi", "tableau", "looker", "qlik", "superset", "mode",
    "salesforce", "sap", "oracle erp", "netsuite", "workday",
    "servicenow", "jira", "confluence", "slack", "microsoft teams",
    "testing", "unit testing", "integration testing", "e2e testing", "tdd", "bdd",
    "jest", "mocha", "cypress", "playwright", "selenium", "pytest", "junit",
    "security", "oauth", "openid connect", "saml", "jwt", "encryption",
    "identity", "iam", "zero trust", "vulnerability management",
    "networking", "tcp/ip", "dns", "http", "https", "ssl", "tls", "load balancing",
    "observability", "monitoring", "logging", "tracing", "prometheus", "grafana",
    "datadog", "new relic", "splunk",
    "product management", "project management", "agile", "scrum", "kanban",
    "leadership", "stakeholder management", "communication", "requirements",
    "documentation", "technical writing",
    "ui/ux", "figma", "sketch", "adobe xd", "user research", "wireframing",
    "seo", "marketing", "growth", "analytics", "a/b testing",
    "accounting", "finance", "budgeting", "procurement",
    "hr", "recruiting", "talent acquisition", "payroll", "benefits",
    "customer support", "sales", "business development", "crm",
    "compliance", "risk management", "gdpr", "hipaa", "sox", "pci",
    "warehouse", "logistics", "supply chain", "operations",
]

MUST_CUES = ("must", "required", "minimum", "mandatory")
NICE_CUES = ("nice to have", "preferred", "plus", "bonus", "optional")


@lru_cache(maxsize=None)
def _word_pattern(skill: str) -> re.Pattern:
    return re.compile(r"(?<![a-z0-9+#])" + re.escape(skill) + r"(?![a-z0-9+#])")


def contains_skill(text: str, skill: str, mode: str = SUBSTRING) -> bool:
    """
    Substring mode matches anywhere, so short entries ("c", "r", "go") also hit
    inside unrelated tokens. Word mode requires the skill not be flanked by
    letters, digits, "+" or "#".
    """
    if not skill:
        return False
    if mode == WORD:
        return _word_pattern(skill).search(text) is not None
    return skill in text


def skills_in_text(text: str, skills, mode: str = SUBSTRING) -> set[str]:
    """Subset of the given skills present in text."""
    return {s for s in skills if contains_skill(text, s, mode)}


def extract_skills(normalized: str, jd_terms=None, mode: str = SUBSTRING) -> list[str]:
    """Sorted lexicon skills plus JD salient terms (len >= 3) present in the text."""
    found = skills_in_text(normalized, SKILL_LEXICON, mode)
    for term in jd_terms or []:
        if len(term) >= MIN_JD_TERM_LEN and contains_skill(normalized, term, mode):
            found.add(term)
    return sorted(found)


def find_must_nice_skills(jd_raw: str, mode: str = SUBSTRING) -> tuple[list[str], list[str]]:
    """
    Classify lexicon skills by the requirement cues on the JD line they appear on.

    A line can carry both must and nice cues; its skills then land in both sets.
    Returns (must, nice), each sorted and deduplicated.
    """
    must: set[str] = set()
    nice: set[str] = set()
    for line in jd_raw.lower().split("\n"):
        line = line.strip()
        if not line:
            continue
        is_must = any(cue in line for cue in MUST_CUES)
        is_nice = any(cue in line for cue in NICE_CUES)
        if not (is_must or is_nice):
            continue
        line_skills = skills_in_text(line, SKILL_LEXICON, mode)
        if is_must:
            must |= line_skills
        if is_nice:
            nice |= line_skills
    return sorted(must), sorted(nice)
