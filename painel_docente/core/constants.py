"""
Constantes Globais do Sistema.
Fonte Única da Verdade (Single Source of Truth) para os dados iniciais (seed),
listas fixas de opções e rótulos exibidos na interface.
"""

# === CHAVES PERSISTIDAS ===
CHAVE_ESCOLA = 'school-info'
CHAVE_FORMULARIO = 'form-data'
CHAVE_MATERIAS = 'subjects-list'
CHAVE_FONTE = 'app-font-size'

# === LISTAS FIXAS ===
SEMESTRES = ["الفصل الدراسي الأول", "الفصل الدراسي الثاني"]
SERIES = [f"الصف {i}" for i in range(1, 13)]

MATERIAS_INICIAIS = ["القرآن الكريم", "التربية الإسلامية", "اللغة العربية", "الرياضيات", "العلوم"]

# === FONTE DA INTERFACE ===
FONTE_MINIMA = 12
FONTE_MAXIMA = 22
FONTE_PADRAO = 16

# === CAMPOS NUMÉRICOS ===
CAMPOS_NUMERICOS_FORMULARIO = ('units', 'lessons')
CAMPOS_TEXTO_FORMULARIO = ('teacher_name', 'semester', 'grade', 'subject')
CONTADORES_ESTRATEGIA = ('traditional', 'active', 'research')
CAMPOS_TEXTO_ESTRATEGIA = ('name', 'description')

# Categorias de contadores de formato fixo e seus campos (na ordem de exibição)
CATEGORIAS_CONTADORES = {
    'extracurricular': ('trip', 'radio', 'competition', 'newspaper',
                        'initiative', 'visit', 'research', 'other'),
    'resource_rooms': ('library', 'showroom', 'interactive_board', 'science_lab', 'other'),
    'experience_cone': ('verbal_symbols', 'visual_symbols', 'sensory_observation',
                        'alternative_experiences', 'direct_experiences'),
}

# === DADOS INICIAIS (SEED) ===
ESCOLA_INICIAL = {
    'name': 'اسم المدرسة الافتراضي',
    'logo': None,
    'branch': 'الفرع الرئيسي',
    'academic_year': '2025/2026 م - 1447 هـ',
}


def _estrategia(id_, nome, tradicional=0, ativo=0, pesquisa=0):
    return {
        'id': id_,
        'name': nome,
        'traditional': tradicional,
        'active': ativo,
        'research': pesquisa,
        'description': '',
    }


ESTRATEGIAS_INICIAIS = [
    _estrategia(1, "اشطب وربح", 1, 3, 1),
    _estrategia(2, "الاستنتاج", 0, 3, 4),
    _estrategia(3, "استراتيجية الأركان الأربعة", 0, 3),
    _estrategia(4, "الاستنتاج", 0, 4),
    _estrategia(5, "البحث عن الكنز", 0, 5),
    _estrategia(6, "البحث عن الكنز", 0, 2),
    _estrategia(7, "التدريس التبادلي", 0, 4),
    _estrategia(8, "الاستنتاج", 0, 3),
    _estrategia(9, "البحث عن الكنز", 0, 1),
    _estrategia(10, "التدريس التبادلي", 0, 3),
    _estrategia(11, "الجكسو", 0, 3),
    _estrategia(12, "القصة", 0, 4),
    _estrategia(13, "التعليم باللعب", 0, 4),
    _estrategia(14, ""),
    _estrategia(15, ""),
    _estrategia(16, "ارسم ما تسمع"),
    _estrategia(17, "استراتيجية الأركان الأربعة", 0, 4),
    _estrategia(18, "البحث عن الكنز"),
    _estrategia(19, ""),
    _estrategia(20, ""),
    _estrategia(21, ""),
]

FORMULARIO_INICIAL = {
    'teacher_name': "أ. خليل المخلافي",
    'semester': SEMESTRES[0],
    'grade': SERIES[6],
    'subject': "اللغة العربية",
    'units': 2,
    'lessons': 15,
    'strategies': ESTRATEGIAS_INICIAIS,
    'extracurricular': {
        'trip': 1,
        'radio': 1,
        'competition': 1,
        'newspaper': 1,
        'initiative': 1,
        'visit': 1,
        'research': 2,
        'other': 1,
    },
    'resource_rooms': {
        'library': 3,
        'showroom': 5,
        'interactive_board': 4,
        'science_lab': 1,
        'other': 2,
    },
    'experience_cone': {
        'verbal_symbols': 10,
        'visual_symbols': 15,
        'sensory_observation': 10,
        'alternative_experiences': 2,
        'direct_experiences': 0,
    },
}

# === RÓTULOS DA INTERFACE ===
ROTULOS_ESTRATEGIA = {
    'traditional': 'تقليدي',
    'active': 'نشط',
    'research': 'بحثي',
}

TITULOS_CATEGORIAS = {
    'extracurricular': 'الأنشطة اللاصفية',
    'resource_rooms': 'غرف المصادر',
    'experience_cone': 'مخروط الخبرة لإدجار ديل',
}

ROTULOS_CONTADORES = {
    'extracurricular': {
        'trip': 'رحلة', 'radio': 'إذاعة', 'competition': 'مسابقة', 'newspaper': 'صحيفة',
        'initiative': 'مبادرة', 'visit': 'زيارة', 'research': 'بحث', 'other': 'أخرى',
    },
    'resource_rooms': {
        'library': 'مكتبة', 'showroom': 'معرض', 'interactive_board': 'سبورة تفاعلية',
        'science_lab': 'معمل علوم', 'other': 'أخرى',
    },
    'experience_cone': {
        'verbal_symbols': 'الرموز اللفظية (كلمات ومحاضرات)',
        'visual_symbols': 'الرموز البصرية (صور وفيديوهات)',
        'sensory_observation': 'الملاحظة الحسية (مشاهدات وعروض)',
        'alternative_experiences': 'الخبرات البديلة (نماذج وعينات)',
        'direct_experiences': 'الخبرات المباشرة (تركيب وصيانة)',
    },
}

# Rótulos curtos usados no gráfico de barras do relatório
ROTULOS_BARRAS_SALAS = {
    'library': 'مكتبة', 'showroom': 'معرض', 'interactive_board': 'سبورة',
    'science_lab': 'معمل', 'other': 'أخرى',
}

# === CORES DOS GRÁFICOS ===
CORES_ESTRATEGIA = {
    'traditional': '#60A5FA',
    'active': '#34D399',
    'research': '#FBBF24',
}
CORES_CONE = {
    'verbal_symbols': '#0088FE',
    'visual_symbols': '#00C49F',
    'sensory_observation': '#FFBB28',
    'alternative_experiences': '#FF8042',
    'direct_experiences': '#AF19FF',
}
COR_BARRAS_SALAS = '#818CF8'
