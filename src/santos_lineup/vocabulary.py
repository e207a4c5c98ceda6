"""
Read-only lookup tables: header synonyms, cargo keywords, country names, goods glossary.

Everything is normalized once at import time with `normalize_text` and frozen into
tuples / mapping proxies, so the tables can be shared between concurrent requests.
"""
from types import MappingProxyType

from .models import CargoCategory, SemanticKey
from .text import normalize_text


def _phrases(*words):
    return tuple(dict.fromkeys(normalize_text(w) for w in words if normalize_text(w)))


# --- Header synonyms ---
# Order matters: the first entry whose phrases occur in a label wins, so the more
# specific keys come first: duvClass before duv, ship and agency before nav
# ("Agência de Navegação"), weight before goods ("Peso da Carga").
HEADER_SYNONYMS = (
    (SemanticKey.IMO, _phrases("imo", "n imo", "numero imo")),
    (SemanticKey.SHIP, _phrases("navio", "nome do navio", "embarcação", "vessel", "ship")),
    (SemanticKey.FLAG, _phrases("bandeira", "band", "flag", "país", "nacionalidade")),
    (SemanticKey.LENGTH_DRAFT, _phrases(
        "comp", "compr", "comprimento", "cal", "calado", "comp cal", "loa", "length", "draft",
    )),
    (SemanticKey.AGENCY, _phrases("agência", "agencia", "agente", "agent", "agency")),
    (SemanticKey.NAV, _phrases("nav", "navegação", "tipo de navegação", "navigation")),
    (SemanticKey.ARRIVAL, _phrases(
        "cheg", "chegada", "data chegada", "hora", "eta", "previsão", "prev chegada", "arrival",
    )),
    (SemanticKey.NOTICE, _phrases("aviso", "emb desc", "embarque desembarque", "notice")),
    (SemanticKey.OPERATION, _phrases("operação", "operacao", "op", "operation")),
    (SemanticKey.WEIGHT, _phrases("peso", "quantidade", "qtde", "ton", "toneladas", "weight")),
    (SemanticKey.GOODS, _phrases("mercadoria", "mercadorias", "carga", "produto", "goods", "cargo")),
    (SemanticKey.VOYAGE, _phrases("viagem", "viag", "voyage", "voy")),
    (SemanticKey.DUV_CLASS, _phrases("duv class", "duv classe", "class", "classe", "classificação")),
    (SemanticKey.DUV, _phrases("duv", "n duv", "numero duv")),
    (SemanticKey.TERMINAL, _phrases("terminal", "term", "local de atracação")),
    (SemanticKey.PIER, _phrases("p", "berço", "berco", "cais", "píer", "pier", "armazém")),
)


# --- Cargo keywords, checked in this order ---
CONTAINER_KEYWORDS = _phrases(
    "container", "conteiner", "conteiners", "conteineres", "contêiner", "contener",
    "tecon", "santos brasil", "btp", "ecoporto", "dp world",
    "terminal de conteiner", "terminal de container",
)
LIQUID_KEYWORDS = _phrases(
    "óleo", "combustível", "diesel", "gasolina", "etanol", "álcool", "nafta", "querosene",
    "qsav", "gasoil", "gasóleo", "bunker", "glp", "lpg", "gnl", "lng", "metanol", "butanol",
    "solvente", "ácido", "alamoa",
)
BULK_KEYWORDS = _phrases(
    "granel", "grão", "grãos", "graos", "soja", "milho", "açúcar", "fertiliz", "ureia", "sal",
    "minério", "carvão", "celulose", "trigo", "farelo", "pellet", "potássio", "sulfato",
    "soda", "cimento", "clínquer", "coque", "petcoke", "mineral", "ore", "sugar", "grain",
)
CARGO_KEYWORDS = (
    (CargoCategory.CONTAINER, CONTAINER_KEYWORDS),
    (CargoCategory.LIQUID, LIQUID_KEYWORDS),
    (CargoCategory.BULK, BULK_KEYWORDS),
)


# --- Flags: country names and adjectives as they appear on the lineup ---
_COUNTRIES = {
    "Panama": ("panamá", "panamenha", "panamenho"),
    "Liberia": ("libéria", "liberiana", "liberiano"),
    "Malta": ("malta", "maltesa", "maltês"),
    "Marshall Islands": ("ilhas marshall", "marshall", "marshallina"),
    "Singapore": ("singapura", "cingapura", "singapuriana"),
    "Bahamas": ("bahamas", "bahamense", "baamense"),
    "Hong Kong": ("hong kong", "hong kong china"),
    "China": ("china", "chinesa", "chinês"),
    "Greece": ("grécia", "grega", "grego"),
    "Cyprus": ("chipre", "cipriota"),
    "Brazil": ("brasil", "brasileira", "brasileiro"),
    "Portugal": ("portugal", "portuguesa", "português"),
    "Madeira (Portugal)": ("madeira", "ilha da madeira"),
    "Norway": ("noruega", "norueguesa", "norueguês"),
    "Denmark": ("dinamarca", "dinamarquesa", "dinamarquês"),
    "Germany": ("alemanha", "alemã", "alemão"),
    "Netherlands": ("holanda", "países baixos", "holandesa", "holandês", "neerlandesa"),
    "United Kingdom": ("reino unido", "inglaterra", "britânica", "britânico", "inglesa"),
    "Isle of Man": ("ilha de man", "isle of man"),
    "Gibraltar": ("gibraltar",),
    "Bermuda": ("bermudas", "bermuda"),
    "Antigua and Barbuda": ("antígua e barbuda", "antigua", "antiguana"),
    "Saint Vincent and the Grenadines": ("são vicente e granadinas", "sao vicente"),
    "Barbados": ("barbados",),
    "Belize": ("belize",),
    "Jamaica": ("jamaica",),
    "Cayman Islands": ("ilhas cayman", "cayman"),
    "Italy": ("itália", "italiana", "italiano"),
    "France": ("frança", "francesa", "francês"),
    "Spain": ("espanha", "espanhola", "espanhol"),
    "Belgium": ("bélgica", "belga"),
    "Luxembourg": ("luxemburgo", "luxemburguesa"),
    "Sweden": ("suécia", "sueca", "sueco"),
    "Finland": ("finlândia", "finlandesa"),
    "Turkey": ("turquia", "turca", "turco"),
    "Russia": ("rússia", "russa", "russo"),
    "Japan": ("japão", "japonesa", "japonês"),
    "South Korea": ("coreia do sul", "coréia do sul", "coreia", "sul coreana"),
    "India": ("índia", "indiana"),
    "Indonesia": ("indonésia", "indonésia"),
    "Vietnam": ("vietnã", "vietna", "vietnamita"),
    "Philippines": ("filipinas", "filipina"),
    "Malaysia": ("malásia", "malaia"),
    "Thailand": ("tailândia", "tailandesa"),
    "United States": ("estados unidos", "eua", "americana", "norte americana"),
    "Canada": ("canadá", "canadense"),
    "Mexico": ("méxico", "mexicana"),
    "Argentina": ("argentina",),
    "Uruguay": ("uruguai", "uruguaia"),
    "Chile": ("chile", "chilena"),
    "Peru": ("peru", "peruana"),
    "Colombia": ("colômbia", "colombiana"),
    "Venezuela": ("venezuela", "venezuelana"),
    "Saudi Arabia": ("arábia saudita", "saudita"),
    "United Arab Emirates": ("emirados árabes unidos", "emirados árabes"),
    "Egypt": ("egito", "egípcia"),
    "Cape Verde": ("cabo verde", "cabo verdiana"),
    "Sierra Leone": ("serra leoa",),
    "Togo": ("togo",),
    "Comoros": ("comores", "comoros"),
    "Cameroon": ("camarões",),
    "Palau": ("palau",),
    "Tuvalu": ("tuvalu",),
    "Vanuatu": ("vanuatu",),
    "Cook Islands": ("ilhas cook",),
}

COUNTRY_NAMES = MappingProxyType({
    phrase: english
    for english, phrases in _COUNTRIES.items()
    for phrase in _phrases(*phrases)
})

# Fragments that survive abbreviation and typos ("PANAMENHA", "LIBERIAN", "MARSH. ISL.")
COUNTRY_HINTS = (
    ("panamen", "Panama"),
    ("panam", "Panama"),
    ("liberi", "Liberia"),
    ("maltes", "Malta"),
    ("marsh", "Marshall Islands"),
    ("singap", "Singapore"),
    ("cingap", "Singapore"),
    ("baham", "Bahamas"),
    ("hong", "Hong Kong"),
    ("chin", "China"),
    ("greg", "Greece"),
    ("grec", "Greece"),
    ("cipri", "Cyprus"),
    ("brasil", "Brazil"),
    ("portug", "Portugal"),
    ("norueg", "Norway"),
    ("dinamar", "Denmark"),
    ("alema", "Germany"),
    ("holand", "Netherlands"),
    ("britan", "United Kingdom"),
    ("antig", "Antigua and Barbuda"),
)


# --- Goods glossary ---
GOODS_GLOSSARY = MappingProxyType({
    normalize_text(pt): en for pt, en in (
        ("contêiner", "Containers"),
        ("contêineres", "Containers"),
        ("conteiner", "Containers"),
        ("container", "Containers"),
        ("carga geral", "General cargo"),
        ("veículos", "Vehicles"),
        ("soja", "Soybeans"),
        ("soja em grãos", "Soybeans"),
        ("farelo de soja", "Soybean meal"),
        ("óleo de soja", "Soybean oil"),
        ("milho", "Corn"),
        ("trigo", "Wheat"),
        ("açúcar", "Sugar"),
        ("açúcar a granel", "Bulk sugar"),
        ("café", "Coffee"),
        ("algodão", "Cotton"),
        ("suco de laranja", "Orange juice"),
        ("celulose", "Pulp"),
        ("fertilizantes", "Fertilizers"),
        ("fertilizante", "Fertilizer"),
        ("ureia", "Urea"),
        ("sal", "Salt"),
        ("enxofre", "Sulphur"),
        ("carvão", "Coal"),
        ("coque", "Coke"),
        ("minério", "Ore"),
        ("cimento", "Cement"),
        ("clínquer", "Clinker"),
        ("soda cáustica", "Caustic soda"),
        ("óleo diesel", "Diesel oil"),
        ("diesel", "Diesel"),
        ("gasolina", "Gasoline"),
        ("etanol", "Ethanol"),
        ("álcool", "Alcohol"),
        ("nafta", "Naphtha"),
        ("querosene", "Kerosene"),
        ("óleo combustível", "Fuel oil"),
        ("glp", "LPG"),
        ("metanol", "Methanol"),
        ("produtos químicos", "Chemicals"),
        ("granel líquido", "Liquid bulk"),
        ("granel sólido", "Dry bulk"),
    )
})
