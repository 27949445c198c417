"""Keyword and pattern tables used by the idea analyzers.

Plain strings are matched as substrings of the lower-cased idea; compiled
patterns are matched with ``search``. Order matters wherever an analyzer
applies first-match-wins semantics.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern, Tuple

# keyword -> canonical (English) audience label
AUDIENCE_KEYWORDS: Dict[str, str] = {
    "designer": "Designers",
    "designers": "Designers",
    "مصمم": "Designers",
    "مصممين": "Designers",
    "developer": "Developers",
    "developers": "Developers",
    "مطور": "Developers",
    "المطورين": "Developers",
    "student": "Students",
    "students": "Students",
    "طالب": "Students",
    "طلاب": "Students",
    "photographer": "Photographers",
    "photographers": "Photographers",
    "مصور": "Photographers",
    "المصورين": "Photographers",
    "restaurant": "Local diners and food lovers",
    "restaurants": "Local diners and food lovers",
    "مطعم": "Local diners and food lovers",
    "مطاعم": "Local diners and food lovers",
    "nonprofit": "Donors and volunteers",
    "nonprofits": "Donors and volunteers",
    "جمعية": "Donors and volunteers",
    "جمعيات": "Donors and volunteers",
    "startup": "Early adopters and investors",
    "startups": "Early adopters and investors",
    "ناشئة": "Early adopters and investors",
    "ستارت اب": "Early adopters and investors",
    "ecommerce": "Online shoppers",
    "shop": "Online shoppers",
    "shoppers": "Online shoppers",
    "متجر": "Online shoppers",
    "متسوقين": "Online shoppers",
    "parents": "Parents",
    "أولياء الأمور": "Parents",
    "teachers": "Teachers",
    "معلمين": "Teachers",
    "fitness": "Fitness enthusiasts",
    "لياقة": "Fitness enthusiasts",
    "realty": "Home buyers and sellers",
    "realestate": "Home buyers and sellers",
    "realtor": "Home buyers and sellers",
    "عقارات": "Home buyers and sellers",
    "b2b": "Business decision-makers",
    "small": "Small business owners",
    "مشروع صغير": "Small business owners",
}

FALLBACK_AUDIENCE = "Prospective customers and early adopters"

# Evaluated in order; the first matching category wins.
SITE_TYPE_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("saas", re.compile(r"saas|subscription|b2b|b2c|سوفت\s?وير|خدمة\s?سحابية")),
    (
        "ecommerce",
        re.compile(r"shop|store|ecommerce|checkout|cart|sell|buy|product|متجر|سلة|عربة|شراء|بيع|منتج|الدفع|تسوق"),
    ),
    (
        "portfolio",
        re.compile(r"portfolio|case study|case studies|work|dribbble|behance|photograph|أعمال|معرض|اعمالي|سيرة"),
    ),
    (
        "restaurant",
        re.compile(r"restaurant|cafe|menu|reservation|reservations|booking|مطعم|قائمة|حجز|حجوزات"),
    ),
    ("blog", re.compile(r"blog|articles|news|magazine|post\b|مدونة|مقالات|أخبار")),
    (
        "event",
        re.compile(r"event|conference|meetup|summit|webinar|launch|فعالية|مؤتمر|ندوة|قمة|ورشة"),
    ),
    ("booking", re.compile(r"book(ing)?|schedule|calendar|appointment|حجز|موعد|جدولة|تقويم")),
)

PROJECT_MODE_PATTERN: Pattern[str] = re.compile(
    r"project|مشروع|mvp|scope|requirements?|spec|brief|proposal|plan|timeline|milestones?|deliverables?"
)

TONE_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"playful|مرح|مرِح"), "playful"),
    (re.compile(r"minimal|بسيط|مبسّط"), "minimal"),
    (re.compile(r"luxury|premium|فاخر|فخم"), "premium"),
    (re.compile(r"bold|جريء"), "bold"),
    (re.compile(r"friendly|ودود|لطيف"), "friendly"),
    (re.compile(r"confident|واثق"), "confident"),
    (re.compile(r"concise|موجز"), "concise"),
)

FALLBACK_TONE: Tuple[str, ...] = ("friendly", "confident", "concise")

CHECKOUT_FEATURE = "E-commerce checkout"
BLOG_FEATURE = "Blog"

FEATURE_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"pricing|plans|tiers|سعر|الأسعار|الخطط"), "Pricing with clear plan comparison"),
    (re.compile(r"faq|questions|أسئلة|الأسئلة\s*الشائعة"), "FAQ"),
    (re.compile(r"blog|article|news|مدونة|مقال|أخبار"), BLOG_FEATURE),
    (re.compile(r"newsletter|subscribe|email list|النشرة|اشترك|قائمة\s*بريد"), "Newsletter signup"),
    (re.compile(r"testimonials|reviews|quotes|آراء|تقييمات|شهادات"), "Testimonials"),
    (re.compile(r"contact|support|help|اتصل|دعم|مساعدة"), "Contact form"),
    (re.compile(r"demo|trial|free trial|تجربة|عرض"), "Free trial / demo request"),
    (re.compile(r"login|signup|account|دخول|تسجيل|حساب"), "Authentication (sign up / log in)"),
    (re.compile(r"checkout|cart|buy|sell|product|الدفع|سلة|شراء|بيع|منتج"), CHECKOUT_FEATURE),
    (
        re.compile(r"booking|schedule|calendar|appointment|reservation|حجز|موعد|جدولة|تقويم"),
        "Booking / scheduling",
    ),
    (re.compile(r"search|بحث"), "Site search"),
)

INDUSTRY_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"health|clinic|hospital|medic|pharma|صحة|عيادة|مستشفى|طبي"), "Healthcare"),
    (re.compile(r"fintech|bank|payment|wallet|loan|finance|insur(tech)?|بنك|محفظة|تمويل"), "Fintech"),
    (
        re.compile(r"education|school|university|course|learning|edtech|teacher|student|تعليم|مدرسة|جامعة|دورة"),
        "Education",
    ),
    (re.compile(r"real(\s)?estate|realt(y|or)|property|عقار"), "Real Estate"),
    (re.compile(r"travel|tour|flight|hotel|booking|trip|tourism|سفر|فندق|رحلة|سياحة"), "Travel"),
    (re.compile(r"ngo|nonprofit|charity|donor|volunteer|خيرية|تبرع|متطوع"), "Nonprofit"),
    (re.compile(r"food|restaurant|cafe|menu|delivery|kitchen|طعام|مطعم|مقهى|توصيل"), "Food & Beverage"),
    (re.compile(r"photograph|photo|gallery|camera|تصوير|كاميرا"), "Photography"),
    (re.compile(r"ecommerce|shop|store|product|cart|checkout|متجر|منتج|سلة"), "E-commerce"),
    (re.compile(r"saas|software|b2b|b2c|برمجيات"), "Software"),
    (re.compile(r"event|conference|webinar|summit|فعالية|مؤتمر"), "Events"),
)

FALLBACK_INDUSTRY = "General"

REGION_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"egypt|egy|eg\b|cairo|giza|alex|مصر|القاهرة|الجيزة|الإسكندرية"), "Egypt"),
    (re.compile(r"ksa|saudi|riyadh|jedd?ah|sa\b|السعودية|الرياض|جدة"), "Saudi Arabia"),
    (re.compile(r"uae|dubai|abu\s?dhabi|ae\b|emirates|الإمارات|دبي|أبوظبي"), "UAE"),
    (re.compile(r"morocco|ma\b|casablanca|rabat|المغرب|الدار البيضاء"), "Morocco"),
    (re.compile(r"tunisia|tn\b|tunis|تونس"), "Tunisia"),
    (re.compile(r"algeria|dz\b|algiers|الجزائر"), "Algeria"),
    (re.compile(r"jordan|jo\b|amman|الأردن"), "Jordan"),
    (re.compile(r"iraq|iq\b|baghdad|العراق|بغداد"), "Iraq"),
    (re.compile(r"usa|united states|us\b|america|أمريكا"), "USA"),
    (re.compile(r"uk|united kingdom|london|gb\b|great britain|بريطانيا|لندن"), "UK"),
    (re.compile(r"europe|eu\b|أوروبا"), "Europe"),
    (re.compile(r"global|worldwide|international|عالمي|دولي"), "Global"),
)

FALLBACK_REGION = "Global"

# Regional currencies are tested before the generic ones.
CURRENCY_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"egp|جنيه|egypt|egy|مصر"), "EGP"),
    (re.compile(r"sar|ريال|ksa|saudi|السعودية"), "SAR"),
    (re.compile(r"aed|درهم|uae|dubai|الإمارات|دبي"), "AED"),
    (re.compile(r"usd|dollar|usa|us\b|دولار"), "USD"),
    (re.compile(r"eur|euro|يورو"), "EUR"),
    (re.compile(r"gbp|pound|uk|sterling|إسترليني"), "GBP"),
)

FALLBACK_CURRENCY = "USD"

PAYMENT_PATTERN: Pattern[str] = re.compile(
    r"payment|pay\b|checkout|stripe|paypal|paymob|fawry|mada|tabby|tamara|دفع"
)

ARABIC_KEYWORD_PATTERN: Pattern[str] = re.compile(r"arabic|عرب|عربي|rtl|\bar\b")
ARABIC_SCRIPT_PATTERN: Pattern[str] = re.compile(r"[\u0600-\u06FF]")

COMPLIANCE_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"gdpr"), "GDPR"),
    (re.compile(r"hipaa"), "HIPAA"),
    (re.compile(r"pci"), "PCI DSS"),
    (re.compile(r"soc\s*2|soc2"), "SOC 2"),
)


__all__ = [
    "ARABIC_KEYWORD_PATTERN",
    "ARABIC_SCRIPT_PATTERN",
    "AUDIENCE_KEYWORDS",
    "BLOG_FEATURE",
    "CHECKOUT_FEATURE",
    "COMPLIANCE_PATTERNS",
    "CURRENCY_PATTERNS",
    "FALLBACK_AUDIENCE",
    "FALLBACK_CURRENCY",
    "FALLBACK_INDUSTRY",
    "FALLBACK_REGION",
    "FALLBACK_TONE",
    "FEATURE_PATTERNS",
    "INDUSTRY_PATTERNS",
    "PAYMENT_PATTERN",
    "PROJECT_MODE_PATTERN",
    "REGION_PATTERNS",
    "SITE_TYPE_PATTERNS",
    "TONE_PATTERNS",
]
