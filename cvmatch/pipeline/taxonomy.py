"""Static category -> keyword taxonomy.

Read-only: wrapped in MappingProxyType, keyword lists are tuples so the
insertion order stays stable for reporting missing keywords.
"""

from types import MappingProxyType

GENERAL_CATEGORY = "general"

KEYWORD_TAXONOMY: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "tecnologia": (
        "javascript", "react", "node.js", "typescript", "python", "java", "aws", "cloud",
        "docker", "kubernetes", "devops", "fullstack", "frontend", "backend", "api",
        "microservicios", "agile", "scrum", "ci/cd", "testing", "git",
    ),
    "marketing": (
        "seo", "sem", "google analytics", "redes sociales", "content marketing",
        "email marketing", "inbound marketing", "crm", "hubspot", "analytics", "kpis",
        "campañas", "branding", "copywriting", "estrategia digital", "marketing automation",
    ),
    "finanzas": (
        "contabilidad", "excel", "sap", "erp", "análisis financiero", "presupuestos",
        "auditoría", "impuestos", "tesorería", "costos", "inversiones", "fintech",
        "compliance", "riesgo", "reporting", "forecast", "balance", "estados financieros",
    ),
    "recursos humanos": (
        "reclutamiento", "selección", "onboarding", "capacitación", "desarrollo",
        "compensaciones", "beneficios", "clima laboral", "evaluación de desempeño",
        "gestión del talento", "relaciones laborales", "hris", "people analytics",
        "cultura organizacional",
    ),
    "diseño": (
        "photoshop", "illustrator", "indesign", "figma", "sketch", "adobe xd", "ui", "ux",
        "diseño web", "diseño gráfico", "responsive", "prototipado", "wireframes",
        "user testing", "accesibilidad", "motion graphics", "design thinking",
    ),
    "ventas": (
        "negociación", "cierre de ventas", "prospección", "crm", "salesforce",
        "gestión de cuentas", "kpis comerciales", "b2b", "b2c", "inside sales",
        "field sales", "pipeline", "forecast", "customer success", "cross-selling",
        "up-selling",
    ),
    GENERAL_CATEGORY: (
        "comunicación", "trabajo en equipo", "liderazgo", "organización",
        "resolución de problemas", "gestión de proyectos", "office", "excel", "word",
        "powerpoint", "idiomas", "inglés", "adaptabilidad", "proactividad",
        "orientación a resultados",
    ),
})


def category_keywords(category: str) -> tuple[str, ...]:
    """Keywords for ``category`` (case-insensitive); empty tuple when unknown."""
    return KEYWORD_TAXONOMY.get(category.lower(), ())
