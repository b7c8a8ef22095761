"""Month names, UI strings and currency formatting per display language.

Month labels are a plain lookup so chart bucketing never depends on the
host locale. Every language uses the Gregorian calendar.
"""

from typing import Union

from betpro.models.schemas import Currency, Language


MONTH_NAMES: dict[Language, list[str]] = {
    Language.EN: ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                  "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    Language.PT: ["jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
                  "jul.", "ago.", "set.", "out.", "nov.", "dez."],
    Language.ES: ["ene", "feb", "mar", "abr", "may", "jun",
                  "jul", "ago", "sept", "oct", "nov", "dic"],
    Language.FR: ["janv.", "févr.", "mars", "avr.", "mai", "juin",
                  "juil.", "août", "sept.", "oct.", "nov.", "déc."],
    Language.IT: ["gen", "feb", "mar", "apr", "mag", "giu",
                  "lug", "ago", "set", "ott", "nov", "dic"],
    Language.DE: ["Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
                  "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez."],
    Language.AR: ["يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
                  "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"],
}

CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.BRL: "R$",
    Currency.EUR: "€",
}

TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "multiple": "Multiple",
        "ia_prompt": (
            "As a professional sports betting analyst, review the betting history below "
            "and give 3 practical tips to improve results. Consider bankroll management "
            "(varying stakes), average odds and the frequency of wins versus losses. "
            "Answer in English, concisely and professionally."
        ),
        "ia_error": "Could not generate insights right now. Check your bankroll and stay disciplined.",
        "import_success": "Bets imported successfully!",
        "import_error": "Import failed. Check the file format.",
    },
    Language.PT: {
        "multiple": "Múltipla",
        "ia_prompt": (
            "Como um analista profissional de apostas esportivas, analise o histórico de "
            "apostas abaixo e forneça 3 dicas práticas para melhorar os resultados. "
            "Considere a gestão de banca (stakes variadas), as odds médias e a frequência "
            "de vitórias versus perdas. Responda em português de forma concisa e profissional."
        ),
        "ia_error": "Não foi possível gerar insights no momento. Verifique sua banca e mantenha a disciplina.",
        "import_success": "Apostas importadas com sucesso!",
        "import_error": "Falha na importação. Verifique o formato do arquivo.",
    },
    Language.ES: {
        "multiple": "Múltiple",
        "ia_prompt": (
            "Como analista profesional de apuestas deportivas, revisa el siguiente historial "
            "y ofrece 3 consejos prácticos para mejorar los resultados. Considera la gestión "
            "del bankroll, las cuotas medias y la frecuencia de aciertos frente a fallos. "
            "Responde en español de forma concisa y profesional."
        ),
        "ia_error": "No fue posible generar análisis ahora. Revisa tu bankroll y mantén la disciplina.",
        "import_success": "¡Apuestas importadas con éxito!",
        "import_error": "Error al importar. Revisa el formato del archivo.",
    },
    Language.FR: {
        "multiple": "Combiné",
        "ia_prompt": (
            "En tant qu'analyste professionnel des paris sportifs, examinez l'historique "
            "ci-dessous et donnez 3 conseils pratiques pour améliorer les résultats. Tenez "
            "compte de la gestion de bankroll, des cotes moyennes et de la fréquence des "
            "gains et des pertes. Répondez en français de façon concise et professionnelle."
        ),
        "ia_error": "Impossible de générer une analyse pour le moment. Surveillez votre bankroll et restez discipliné.",
        "import_success": "Paris importés avec succès !",
        "import_error": "Échec de l'importation. Vérifiez le format du fichier.",
    },
    Language.IT: {
        "multiple": "Multipla",
        "ia_prompt": (
            "Come analista professionista di scommesse sportive, esamina lo storico qui sotto "
            "e fornisci 3 consigli pratici per migliorare i risultati. Considera la gestione "
            "del bankroll, le quote medie e la frequenza di vincite e perdite. "
            "Rispondi in italiano in modo conciso e professionale."
        ),
        "ia_error": "Impossibile generare analisi in questo momento. Controlla il bankroll e mantieni la disciplina.",
        "import_success": "Scommesse importate con successo!",
        "import_error": "Importazione non riuscita. Controlla il formato del file.",
    },
    Language.DE: {
        "multiple": "Kombi",
        "ia_prompt": (
            "Analysiere als professioneller Sportwetten-Analyst den folgenden Wettverlauf "
            "und gib 3 praktische Tipps zur Verbesserung der Ergebnisse. Berücksichtige "
            "Bankroll-Management, durchschnittliche Quoten und das Verhältnis von Gewinnen "
            "zu Verlusten. Antworte auf Deutsch, knapp und professionell."
        ),
        "ia_error": "Analyse derzeit nicht möglich. Behalte deine Bankroll im Blick und bleib diszipliniert.",
        "import_success": "Wetten erfolgreich importiert!",
        "import_error": "Import fehlgeschlagen. Bitte Dateiformat prüfen.",
    },
    Language.AR: {
        "multiple": "متعدد",
        "ia_prompt": (
            "بصفتك محللاً محترفاً للمراهنات الرياضية، راجع سجل الرهانات التالي وقدم 3 نصائح "
            "عملية لتحسين النتائج. ضع في اعتبارك إدارة رأس المال ومتوسط الاحتمالات وتكرار "
            "الفوز مقابل الخسارة. أجب باللغة العربية بإيجاز واحترافية."
        ),
        "ia_error": "تعذر إنشاء التحليل الآن. راقب رأس مالك وحافظ على الانضباط.",
        "import_success": "تم استيراد الرهانات بنجاح!",
        "import_error": "فشل الاستيراد. تحقق من تنسيق الملف.",
    },
}


def month_label(language: Union[Language, str], month: int) -> str:
    """Short month name for a calendar month (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return MONTH_NAMES[Language(language)][month - 1]


def translate(language: Union[Language, str], key: str) -> str:
    """Look up a UI string, falling back to English."""
    strings = TRANSLATIONS.get(Language(language), TRANSLATIONS[Language.EN])
    return strings.get(key, TRANSLATIONS[Language.EN][key])


def format_money(value: float, currency: Union[Currency, str]) -> str:
    """Format an amount with the currency symbol and two decimals."""
    symbol = CURRENCY_SYMBOLS[Currency(currency)]
    if value >= 0:
        return f"{symbol} {value:,.2f}"
    return f"-{symbol} {abs(value):,.2f}"
