from __future__ import annotations

STOPWORDS = frozenset({
    # Articles, determiners
    "the", "an", "this", "that", "these", "those", "each", "every", "some", "any", "all",
    "such", "other", "another",
    # Auxiliary / modal verbs
    "is", "are", "was", "were", "be", "been", "being", "am", "do", "does", "did", "done",
    "have", "has", "had", "having", "will", "would", "shall", "should", "can", "could",
    "may", "might", "must",
    # Pronouns
    "you", "your", "yours", "we", "our", "ours", "they", "them", "their", "theirs", "he",
    "him", "his", "she", "her", "hers", "its", "who", "whom", "whose", "which", "what",
    "us", "me", "my", "mine", "it",
    # Conjunctions
    "and", "but", "nor", "yet", "for", "so", "or", "because", "although", "though",
    "while", "whether", "either", "neither", "both", "than", "then", "also", "not",
    # Prepositions
    "with", "from", "into", "onto", "about", "above", "after", "before", "between",
    "during", "under", "over", "through", "within", "without", "across", "per", "via",
    "upon", "toward", "towards", "including", "like",
})

STRONG_ACTION_VERBS = (
    "achieved", "managed", "developed", "implemented", "created", "led", "designed",
    "built", "launched", "delivered", "improved", "increased", "reduced", "optimized",
    "engineered", "architected", "automated", "streamlined", "spearheaded", "mentored",
    "scaled", "drove", "established", "negotiated", "orchestrated", "resolved",
    "transformed", "accelerated", "analyzed", "coordinated",
)

GENERIC_PHRASES = (
    "responsible for", "duties included", "team player", "hard worker", "hardworking",
    "detail-oriented", "self-starter", "go-getter", "results-driven", "think outside the box",
    "worked on", "helped with", "various tasks", "synergy", "motivated individual",
    "excellent communication skills",
)

INDUSTRY_TERMS = (
    "agile", "scrum", "kanban", "ci/cd", "devops", "microservices", "cloud-native",
    "serverless", "tdd", "saas", "mlops", "observability", "distributed systems",
    "data pipeline", "infrastructure as code",
)

ROLE_MARKERS = frozenset({
    "engineer", "engineering", "developer", "manager", "management", "lead", "leader",
    "senior", "junior", "principal", "staff", "architect", "analyst", "director", "head",
    "intern", "specialist", "consultant", "administrator", "scientist", "designer",
    "mid-level", "entry-level", "associate", "executive", "officer", "coordinator",
})

ACTION_VERB_MARKERS = (
    "develop", "manag", "lead", "design", "build", "built", "implement", "architect",
    "deliver", "mentor", "optimiz", "automat", "launch", "collaborat", "coordinat",
    "analy", "improv", "maintain", "deploy", "own",
)

CRITICAL_MARKER_PATTERN = r"\b(?:required|mandatory|essential|must)\b"
LEADING_CRITICAL_MARKER_PATTERN = (
    r"\b(?:must[\s-]have|must\s+know|need\s+to\s+have|requires|required\s*:|mandatory\s*:"
    r"|essential\s*:|required\s+(?:skills|qualifications|experience)|requirements\s*:)"
)
