import uuid

DATE_FORMAT = "%Y-%m-%d"

# Keys are accent-free; month tokens are folded the same way before lookup.
MONTHS = {
    "janeiro": 1,
    "jan": 1,
    "fevereiro": 2,
    "fev": 2,
    "marco": 3,
    "mar": 3,
    "abril": 4,
    "abr": 4,
    "maio": 5,
    "mai": 5,
    "junho": 6,
    "jun": 6,
    "julho": 7,
    "jul": 7,
    "agosto": 8,
    "ago": 8,
    "setembro": 9,
    "set": 9,
    "outubro": 10,
    "out": 10,
    "novembro": 11,
    "nov": 11,
    "dezembro": 12,
    "dez": 12,
}

MEETING_TYPES = ("meio_semana", "fim_semana")
DEFAULT_MEETING_TYPE = "meio_semana"

MECHANICS_ROLES = (
    "presidente",
    "leitor",
    "indicador_entrada",
    "indicador_auditorio",
    "audio_video",
    "volante",
    "palco",
)

MAX_MINISTRY_PARTS = 4
MAX_CHRISTIAN_LIFE_PARTS = 3
CONGREGATION_STUDY_PART = "Estudo bíblico de congregação"

# Generated meeting ids are derived from content so repeated runs agree.
TEMP_ID_PREFIX = "temp-"
TEMP_ID_NAMESPACE = uuid.UUID("6f1c2b4e-8d3a-4c5f-9e7b-2a1d0c3b4e5f")

ROOT_KEYS = {
    "nvc": "nossa_vida_crista",
    "mecanicas": "designacoes_mecanicas",
    "limpeza": "escalas",
    "discursos": "discursos",
}
