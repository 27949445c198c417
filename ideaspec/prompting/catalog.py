"""Bilingual message catalog for rendered documents.

Headings and fixed copy are keyed by stable message IDs. Data values
(sections, audiences, tones, site types) are keyed by their canonical
English value, since that is what the feature vector carries. Any entry
missing in Arabic falls back to English.
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

MESSAGES: Dict[str, Dict[str, str]] = {
    "heading.overview": {"en": "Project overview", "ar": "نظرة عامة على المشروع"},
    "heading.audience": {"en": "Target audience", "ar": "الجمهور المستهدف"},
    "heading.goals": {"en": "Primary goals", "ar": "الأهداف الرئيسية"},
    "heading.tone": {"en": "Tone & voice", "ar": "النبرة والأسلوب"},
    "heading.structure": {"en": "Suggested site structure", "ar": "هيكل الموقع المقترح"},
    "heading.features": {"en": "Key features", "ar": "الميزات الأساسية"},
    "heading.content": {"en": "Content & CTAs", "ar": "المحتوى والدعوات للإجراء"},
    "heading.visual": {"en": "Visual style", "ar": "الأسلوب البصري"},
    "heading.notes": {"en": "Notes from the original idea", "ar": "ملاحظات من الفكرة الأصلية"},
    "heading.blueprint": {"en": "Project blueprint", "ar": "مخطط المشروع"},
    "heading.scope": {"en": "Scope", "ar": "النطاق"},
    "heading.sitemap": {"en": "Pages & sitemap", "ar": "الصفحات وخريطة الموقع"},
    "heading.user_stories": {"en": "User stories", "ar": "قصص المستخدم"},
    "heading.non_functional": {"en": "Non-functional requirements", "ar": "متطلبات غير وظيفية"},
    "heading.kpis": {"en": "KPIs", "ar": "المؤشرات الرئيسية"},
    "heading.tech": {"en": "Tech stack suggestions", "ar": "اقتراح التكديس التقني"},
    "heading.checklist": {"en": "Content checklist", "ar": "قائمة المحتوى"},
    "heading.milestones": {"en": "Milestones", "ar": "المعالم"},
    "heading.questions": {"en": "Questions to clarify", "ar": "أسئلة توضيحية"},
    "overview.line": {
        "en": "Build a {site_type} for {audience}. The purpose is to clearly communicate value and drive conversions.",
        "ar": "بناء {site_type} موجه لـ {audience}. الهدف هو توصيل القيمة بوضوح وزيادة التحويلات.",
    },
    "scope.industry": {"en": "Industry: {value}", "ar": "الصناعة: {value}"},
    "scope.regions": {"en": "Regions: {value}", "ar": "المناطق: {value}"},
    "scope.languages": {"en": "Languages: {value}", "ar": "اللغات: {value}"},
    "scope.currency": {"en": "Currency: {value}", "ar": "العملة: {value}"},
}

BULLETS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "goals": {
        "en": (
            "Explain the product/service in plain language",
            "Establish trust with proof",
            "Guide visitors to a focused CTA (e.g., sign up, book, buy)",
        ),
        "ar": (
            "شرح المنتج/الخدمة بلغة بسيطة",
            "بناء الثقة عبر الأدلة",
            "توجيه الزائر إلى دعوة إجراء مركّزة (مثل التسجيل، الحجز، الشراء)",
        ),
    },
    "content": {
        "en": (
            "Clear headline that states the value",
            "Subheadline that clarifies what, who, and outcome",
            "Primary CTA above the fold (sticky on mobile)",
            "Secondary CTA for evaluation (e.g., Learn more)",
            "Trust signals: logos, testimonials, ratings",
        ),
        "ar": (
            "عنوان واضح يشرح القيمة",
            "عنوان فرعي يوضح ماذا ومن ولأي نتيجة",
            "دعوة إجراء أساسية أعلى الصفحة (وثابتة على الجوال)",
            "دعوة إجراء ثانوية للتقييم (مثل: اعرف المزيد)",
            "مؤشرات الثقة: شعارات، آراء، تقييمات",
        ),
    },
    "visual": {
        "en": (
            "Clean, modern, accessible",
            "High contrast, generous spacing, responsive layout",
            "Use one accent color, consistent component styles",
        ),
        "ar": (
            "تصميم نظيف وحديث وقابل للوصول",
            "تباين عالٍ ومسافات مريحة وتصميم متجاوب",
            "استخدام لون إبراز واحد وتناسق العناصر",
        ),
    },
}

SITE_TYPE_LABELS_AR: Dict[str, str] = {
    "saas": "موقع تسويقي لخدمة سحابية",
    "ecommerce": "متجر إلكتروني",
    "portfolio": "موقع أعمال/معرض",
    "restaurant": "موقع مطعم",
    "blog": "مدونة / مركز محتوى",
    "event": "صفحة هبوط لفعالية",
    "booking": "موقع حجوزات",
    "generic": "صفحة هبوط",
}

SECTION_LABELS_AR: Dict[str, str] = {
    "Hero": "الرئيسية",
    "Problem": "المشكلة",
    "Solution": "الحل",
    "Features": "الميزات",
    "Testimonials": "آراء العملاء",
    "Pricing": "الأسعار",
    "FAQ": "الأسئلة الشائعة",
    "Footer": "التذييل",
    "Featured Products": "منتجات مميزة",
    "Collections": "التصنيفات",
    "Product Detail": "تفاصيل المنتج",
    "Cart / Checkout": "السلة / الدفع",
    "Selected Work": "أعمال مختارة",
    "About": "من نحن",
    "Services": "الخدمات",
    "Contact": "اتصل بنا",
    "Menu": "القائمة",
    "Gallery": "معرض الصور",
    "Reservations": "الحجوزات",
    "Location & Hours": "الموقع وساعات العمل",
    "Latest Posts": "أحدث المقالات",
    "Categories": "التصنيفات",
    "Featured Post": "مقال مميز",
    "Newsletter": "النشرة البريدية",
    "About Event": "عن الفعالية",
    "Agenda": "الجدول",
    "Speakers": "المتحدثون",
    "Tickets": "التذاكر",
    "Benefits": "الفوائد",
    "CTA": "دعوة للإجراء",
}

AUDIENCE_LABELS_AR: Dict[str, str] = {
    "Designers": "المصممون",
    "Developers": "المطورون",
    "Students": "الطلاب",
    "Photographers": "المصورون",
    "Local diners and food lovers": "عشاق الطعام ورواد المطاعم",
    "Donors and volunteers": "المتبرعون والمتطوعون",
    "Early adopters and investors": "المتبنون الأوائل والمستثمرون",
    "Online shoppers": "المتسوقون عبر الإنترنت",
    "Parents": "أولياء الأمور",
    "Teachers": "المعلمون",
    "Fitness enthusiasts": "مهتمو اللياقة",
    "Home buyers and sellers": "البائعون والمشترون للعقارات",
    "Business decision-makers": "صنّاع القرار في الأعمال",
    "Small business owners": "أصحاب المشاريع الصغيرة",
    "Prospective customers and early adopters": "العملاء المحتملون والمبكرون",
}

TONE_LABELS_AR: Dict[str, str] = {
    "playful": "مرح",
    "minimal": "بسيط",
    "premium": "فاخر",
    "bold": "جريء",
    "friendly": "ودود",
    "confident": "واثق",
    "concise": "موجز",
}

_LABELS_AR: Dict[str, Mapping[str, str]] = {
    "site_type": SITE_TYPE_LABELS_AR,
    "section": SECTION_LABELS_AR,
    "audience": AUDIENCE_LABELS_AR,
    "tone": TONE_LABELS_AR,
}


class Catalog:
    """Looks up localized copy for one output language."""

    def __init__(self, lang: str = "en") -> None:
        self.lang = lang if lang in {"en", "ar"} else "en"

    def text(self, key: str, **values: str) -> str:
        entry = MESSAGES[key]
        template = entry.get(self.lang) or entry["en"]
        return template.format(**values) if values else template

    def bullets(self, key: str) -> Tuple[str, ...]:
        entry = BULLETS[key]
        return entry.get(self.lang) or entry["en"]

    def label(self, kind: str, value: str, *, english: str | None = None) -> str:
        """Localize a data value; unknown values are returned unchanged.

        ``english`` supplies the English display text when it differs from
        the canonical key (site types are keyed by enum value).
        """
        if self.lang == "ar":
            translated = _LABELS_AR.get(kind, {}).get(value)
            if translated:
                return translated
        return english if english is not None else value

    def labels(self, kind: str, values: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(self.label(kind, value) for value in values)


__all__ = ["BULLETS", "Catalog", "MESSAGES"]
