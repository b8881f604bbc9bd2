"""
Static vocabulary used by the classifier, the inline formatter, the screen
renderer and file naming.

Bump VOCABULARY_VERSION whenever a list changes so rendered output can be
traced back to the word lists that produced it.
"""

VOCABULARY_VERSION = "1.0"

# ─── Line classification ────────────────────────────────────────────────────

# Canonical section names. Matched case-insensitively at the start of a line.
SECTION_NAMES = (
    "CONTACT", "CONTACT INFORMATION",
    "SUMMARY", "PROFESSIONAL SUMMARY",
    "EXPERIENCE", "WORK EXPERIENCE", "PROFESSIONAL EXPERIENCE",
    "EDUCATION",
    "SKILLS", "KEY SKILLS", "TECHNICAL SKILLS", "PROGRAMMING SKILLS",
    "CERTIFICATIONS",
    "PROJECTS",
    "ACHIEVEMENTS", "AWARDS",
    "OBJECTIVE",
    "PROFILE",
    "PUBLICATIONS", "RESEARCH", "COURSEWORK",
)

CONTACT_LABELS = ("phone", "email", "linkedin", "github", "tel", "mobile")

SKILL_LABELS = ("Programming", "Languages", "Technologies", "Tools", "Frameworks", "Databases")

# ─── Screen rendering ───────────────────────────────────────────────────────

# A plain line right after the name that mentions one of these is a subtitle.
JOB_TITLE_TERMS = (
    "engineer", "developer", "manager", "analyst", "specialist",
    "coordinator", "director", "consultant",
)

# ─── Inline highlighting ────────────────────────────────────────────────────

TECH_TERMS = (
    "java", "spring", "boot", "spring boot", "microservices", "rest", "api",
    "mongodb", "postgresql", "mysql", "aws", "docker", "kubernetes", "react",
    "javascript", "typescript", "python", "node", "node.js", "angular", "vue",
    "git", "jenkins", "ci/cd", "agile", "scrum", "html", "css", "sass",
    "webpack", "redux", "graphql", "firebase", "azure", "hibernate", "maven",
    "gradle", "jvm", "kotlin", "scala", "c++", "c#", ".net", "php", "ruby",
    "go", "rust", "swift", "flutter", "dart", "tensorflow", "pytorch",
    "machine learning", "ai", "data science", "sql", "nosql", "redis",
    "elasticsearch",
)

ACTION_VERBS = (
    "developed", "implemented", "managed", "led", "built", "designed",
    "optimized", "improved", "achieved", "delivered", "collaborated",
    "created", "established", "coordinated", "maintained", "architected",
    "deployed", "automated", "streamlined", "increased", "reduced",
    "enhanced", "integrated", "launched", "scaled", "responsible",
    "experience", "scalable", "performance", "architecture", "solution",
)

# ─── File naming ────────────────────────────────────────────────────────────

# Checked in order; the first one found in the document names the role.
ROLE_KEYWORDS = (
    "engineer", "developer", "architect", "manager", "lead", "senior", "junior",
    "analyst", "consultant", "specialist", "coordinator", "director", "designer",
    "full stack", "backend", "frontend", "software", "web", "mobile", "devops",
    "data", "machine learning", "ai", "blockchain", "cloud",
)
