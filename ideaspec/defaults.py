"""Per-site-type default tables used to fill in the feature vector."""

from __future__ import annotations

from typing import Dict, Tuple

SITE_TYPE_LABELS: Dict[str, str] = {
    "saas": "SaaS marketing site",
    "ecommerce": "E-commerce store",
    "portfolio": "Portfolio site",
    "restaurant": "Restaurant site",
    "blog": "Blog / content hub",
    "event": "Event landing page",
    "booking": "Booking site",
    "generic": "Landing page",
}

SECTIONS_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "saas": ("Hero", "Problem", "Solution", "Features", "Testimonials", "Pricing", "FAQ", "Footer"),
    "ecommerce": ("Hero", "Featured Products", "Collections", "Product Detail", "Cart / Checkout", "Footer"),
    "portfolio": ("Hero", "Selected Work", "About", "Services", "Testimonials", "Contact"),
    "restaurant": ("Hero", "Menu", "Gallery", "Reservations", "Location & Hours", "Contact"),
    "blog": ("Hero", "Latest Posts", "Categories", "Featured Post", "About", "Newsletter"),
    "event": ("Hero", "About Event", "Agenda", "Speakers", "Tickets", "FAQ"),
    "booking": ("Hero", "Services", "Availability", "Pricing", "Testimonials", "Contact"),
    "generic": ("Hero", "Benefits", "Features", "Social Proof", "CTA"),
}

DEFAULT_FEATURES_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "saas": (
        "Hero with value proposition and primary CTA",
        "Feature highlights",
        "Social proof and testimonials",
        "Pricing plans",
        "FAQ",
        "Footer with legal links",
    ),
    "ecommerce": (
        "Featured products grid",
        "Product detail pages",
        "Cart and checkout",
        "Trust badges and reviews",
        "Newsletter signup",
    ),
    "portfolio": (
        "Selected work/gallery",
        "About and services",
        "Testimonials",
        "Contact form",
        "Simple blog (optional)",
    ),
    "restaurant": (
        "Hero with signature dish",
        "Menu",
        "Reservations / booking",
        "Location, hours, and map",
        "Photo gallery",
    ),
    "blog": (
        "Latest posts",
        "Categories and tags",
        "Author bio",
        "Newsletter signup",
        "Search",
    ),
    "event": (
        "Event overview",
        "Agenda / schedule",
        "Speakers",
        "Tickets / registration",
        "FAQ",
    ),
    "booking": (
        "Service overview",
        "Calendar and availability",
        "Pricing",
        "Testimonials",
        "Contact",
    ),
    "generic": (
        "Hero with value proposition",
        "Problem / solution",
        "Key features",
        "Social proof",
        "Primary CTA",
    ),
}

PAGES_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "saas": ("Home", "Features", "Pricing", "Docs", "Changelog", "Blog", "About", "Contact", "Login", "Sign up", "Dashboard"),
    "ecommerce": ("Home", "Shop", "Collections", "Product", "Cart", "Checkout", "Account", "Orders", "Wishlist", "Support", "Blog"),
    "portfolio": ("Home", "Work", "About", "Services", "Testimonials", "Contact", "Blog"),
    "restaurant": ("Home", "Menu", "Reservations", "Gallery", "Location & Hours", "About", "Contact"),
    "blog": ("Home", "Blog", "Post", "Categories", "About", "Contact", "Newsletter"),
    "event": ("Home", "About Event", "Agenda", "Speakers", "Tickets", "FAQ", "Venue", "Contact"),
    "booking": ("Home", "Services", "Availability", "Pricing", "Book", "Account", "Contact", "FAQ"),
    "generic": ("Home", "About", "Features", "Pricing", "Contact", "Blog"),
}

PAYMENT_PAGES: Tuple[str, ...] = ("Billing", "Checkout")
BLOG_PAGE = "Blog"

USER_STORIES_BASE: Tuple[str, ...] = (
    "As a visitor, I understand the value within 5 seconds",
    "As a visitor, I can complete the primary CTA easily",
    "As a visitor, I can trust the product via social proof",
)

USER_STORIES_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "saas": (
        "As a user, I can start a free trial",
        "As a user, I can manage my plan and billing",
        "As a user, I can reset my password",
        "As an admin, I can see key metrics in the dashboard",
    ),
    "ecommerce": (
        "As a shopper, I can browse and filter products",
        "As a shopper, I can add items to cart",
        "As a shopper, I can checkout and pay securely",
        "As a user, I can view my orders",
    ),
    "portfolio": (
        "As a client, I can view selected work",
        "As a client, I can contact for a quote",
    ),
    "restaurant": (
        "As a guest, I can view the menu",
        "As a guest, I can book a table",
        "As a guest, I can see location and hours",
    ),
    "blog": (
        "As a reader, I can read and search posts",
        "As a reader, I can subscribe to the newsletter",
    ),
    "event": (
        "As an attendee, I can view agenda and speakers",
        "As an attendee, I can buy tickets and receive confirmation",
    ),
    "booking": (
        "As a client, I can view availability",
        "As a client, I can book, reschedule, or cancel appointments",
    ),
    "generic": (),
}

KPIS_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "saas": ("Signup conversion rate", "Activation rate", "Upgrade rate"),
    "ecommerce": ("Add-to-cart rate", "Checkout completion rate", "Average order value"),
    "portfolio": ("Contact inquiries", "Proposal acceptance rate"),
    "restaurant": ("Reservation completion rate", "Menu views"),
    "blog": ("Newsletter signups", "Time on page"),
    "event": ("Ticket sales", "Registration conversion"),
    "booking": ("Booking completion rate", "No-show rate"),
    "generic": ("Primary CTA conversion",),
}

TECH_BASELINE: Tuple[str, ...] = (
    "Next.js 14+",
    "React",
    "TypeScript",
    "Tailwind CSS",
    "shadcn/ui",
    "Prisma + PostgreSQL",
    "NextAuth or similar",
    "Vercel or similar hosting",
)
TECH_PAYMENTS = "Stripe (or regional: Paymob/Fawry/MADA)"
TECH_ARABIC = "i18n with Arabic + RTL support"
TECH_BLOG = "MDX or headless CMS (e.g., Sanity)"

NON_FUNCTIONAL_BASE: Tuple[str, ...] = (
    "Performance: LCP < 2.5s, TTI < 3.5s",
    "Accessibility: WCAG 2.1 AA",
    "SEO: title/description, sitemap.xml, robots.txt, Open Graph",
    "Security: HTTPS, CSP, secrets management",
    "Analytics: conversion events and funnels",
)
NON_FUNCTIONAL_ARABIC = "Internationalization: RTL and Arabic typography"

CONTENT_CHECKLIST: Tuple[str, ...] = (
    "Clear headline and subheadline",
    "Value proposition and benefits",
    "High-quality visuals or screenshots",
    "Social proof: logos, testimonials, ratings",
    "Pricing and plans (if applicable)",
    "FAQ and contact methods",
)

MILESTONES: Tuple[str, ...] = (
    "MVP skeleton (layout, navigation, theming)",
    "Core flows implemented",
    "Content integration and SEO",
    "QA: accessibility and performance",
    "Launch and analytics instrumentation",
)

PERSONAS: Tuple[str, ...] = ("Visitor/Evaluator", "Buyer/Decision-maker", "Admin/Owner")

CLARIFYING_QUESTIONS_BASE: Tuple[str, ...] = (
    "What is the brand/product name?",
    "What is the one-line value proposition?",
    "Who is the primary audience and which market/region?",
    "What is the primary CTA (e.g., sign up, book, buy)?",
    "Do you have existing branding (logo, colors, typography)?",
    "What integrations are required (e.g., analytics, CRM, payment)?",
    "What is the launch timeline and key milestones?",
    "What budget or constraints should we consider?",
)
QUESTION_PAYMENTS = (
    "Which payment gateways do you prefer (Stripe, Paymob, Fawry, MADA, etc.) and which currency to charge?"
)
QUESTION_ARABIC = "Do you require Arabic RTL support and translation for all pages?"
QUESTIONS_BY_TYPE: Dict[str, Tuple[str, ...]] = {
    "ecommerce": ("What is the product catalog size, categories, variants, shipping/returns policy?",),
    "saas": ("What is the pricing model (free, freemium, trial), onboarding flow, and docs scope?",),
    "booking": ("What services, durations, availability rules, and rescheduling/cancellation policies apply?",),
    "event": ("What ticket types, seating, speakers, and content schedule are expected?",),
}
QUESTION_COMPLIANCE = (
    "Do you need legal pages (Privacy, Terms, Cookies) and data retention policies aligned with compliance?"
)


__all__ = [
    "BLOG_PAGE",
    "CLARIFYING_QUESTIONS_BASE",
    "CONTENT_CHECKLIST",
    "DEFAULT_FEATURES_BY_TYPE",
    "KPIS_BY_TYPE",
    "MILESTONES",
    "NON_FUNCTIONAL_ARABIC",
    "NON_FUNCTIONAL_BASE",
    "PAGES_BY_TYPE",
    "PAYMENT_PAGES",
    "PERSONAS",
    "QUESTIONS_BY_TYPE",
    "QUESTION_ARABIC",
    "QUESTION_COMPLIANCE",
    "QUESTION_PAYMENTS",
    "SECTIONS_BY_TYPE",
    "SITE_TYPE_LABELS",
    "TECH_ARABIC",
    "TECH_BASELINE",
    "TECH_BLOG",
    "TECH_PAYMENTS",
    "USER_STORIES_BASE",
    "USER_STORIES_BY_TYPE",
]
