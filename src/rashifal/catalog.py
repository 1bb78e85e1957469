"""Fixed Bengali reference data: signs, nakshatras, template pools, nakshatra flavour.

Order matters everywhere in this module. Sign order fixes the payload's key
order; pool order fixes which fragment a given draw selects; nakshatra order
is the canonical Vedic sequence starting at Ashvini (0° of the ecliptic).
"""

from types import MappingProxyType

from rashifal.models import TemplatePools

# Mesha → Meena
SIGNS: tuple[str, ...] = (
    "মেষ",
    "বৃষ",
    "মিথুন",
    "কর্কট",
    "সিংহ",
    "কন্যা",
    "তুলা",
    "বৃশ্চিক",
    "ধনু",
    "মকর",
    "কুম্ভ",
    "মীন",
)

# Bengali sign name → English name (for logs, CLI and the English UI)
SIGN_NAMES_EN: MappingProxyType[str, str] = MappingProxyType(
    dict(
        zip(
            SIGNS,
            (
                "Aries",
                "Taurus",
                "Gemini",
                "Cancer",
                "Leo",
                "Virgo",
                "Libra",
                "Scorpio",
                "Sagittarius",
                "Capricorn",
                "Aquarius",
                "Pisces",
            ),
        )
    )
)

NAKSHATRAS: tuple[str, ...] = (
    "অশ্বিনী",
    "ভরণী",
    "কৃত্তিকা",
    "রোহিণী",
    "মৃগশিরা",
    "আর্দ্রা",
    "পুনর্বসু",
    "পুষ্যা",
    "অশ্লেষা",
    "মঘা",
    "পূর্বফাল্গুনী",
    "উত্তরফাল্গুনী",
    "হস্তা",
    "চিত্রা",
    "স্বাতী",
    "বিশাখা",
    "অনুরাধা",
    "জ্যেষ্ঠা",
    "মূলা",
    "পূর্বাষাঢ়া",
    "উত্তরাষাঢ়া",
    "শ্রবণা",
    "ধনিষ্ঠা",
    "শতভিষা",
    "পূর্বভাদ্রপদা",
    "উত্তরভাদ্রপদা",
    "রেবতী",
)

TEMPLATES = TemplatePools(
    lead=(
        "আজ আপনার সৃজনশীল শক্তি জাগ্রত হবে। অনেকেই আপনার নতুন আইডিয়াকে প্রশংসা করবে।",
        "আজ ধৈর্য ও বিচক্ষণতা কাজে দেবে—একটু সাবধান থাকুন, তবে সুযোগ আছে।",
        "আজ আপনার মন কর্মে একাগ্র থাকবে; নতুন সিদ্ধান্ত গ্রহণে সাফল্য মিলবে।",
        "আজ স্বাভাবিকের চেয়ে বেশি যোগাযোগ ঘটবে—মিথস্ক্রিয়া ফলদায়ক হবে।",
        "আত্মবিশ্লেষণ ও শৃঙ্খলা আজ বিশেষ ফল দেবে।",
    ),
    health=(
        "গলা ও শ্বাসনালায় হালকা অসুবিধা হতে পারে — গরম পানীয় সহনীয় হবে।",
        "হজম বা পেটের সমস্যা এড়াতে হালকা খাবার খান।",
        "চোখ ও মাথায় ক্লান্তি এড়াতে মাঝেমধ্যে বিরতি নিন।",
        "হালকা ব্যায়াম বা হাঁটা স্বাস্থ্যকে সুদৃঢ় রাখবে।",
        "বিশ্রাম ও পর্যাপ্ত পানি গ্রহণ রাখুন।",
    ),
    advice=(
        "নিজের সময় দিন, বিশ্রামে ফাঁকি নিয়ে কাজ করুন।",
        "নতুন আইডিয়াকে নোট করে রাখুন; সন্ধ্যায় পুনর্বিবেচনা করুন।",
        "পরিবারের সদস্যদের সঙ্গে সময় কাটান; মন শান্ত হবে।",
        "অর্থ-ব্যবস্থায় সতর্ক থাকুন; অপ্রয়োজনীয় খরচ এড়ান।",
        "গভীর শ্বাস নিয়ে ধ্যান চেষ্টা করুন—মনে শীতলতা আনবে।",
    ),
)

# Only the first ten nakshatras carry a flavour line; the rest read as "".
NAKSHATRA_FLAVOR: MappingProxyType[str, str] = MappingProxyType(
    {
        "অশ্বিনী": "শুরু করার শক্তি এবং তাড়না আছে।",
        "ভরণী": "সৃজনশীল ও সহমর্মিতাপূর্ণ পরিবেশে থাকবেন।",
        "কৃত্তিকা": "পরিশ্রমের ফল আজ প্রতিফলিত হবে।",
        "রোহিণী": "পারিবারিক মেলামেশা এবং স্নেহ বাড়বে।",
        "মৃগশিরা": "উৎসাহ ও অনুসন্ধানশীলতা বাড়বে।",
        "আর্দ্রা": "আবেগ ও অনীহা মিশ্র অনুভব হতে পারে।",
        "পুনর্বসু": "স্থিরতা ও পুনরুজ্জীবনের সময়।",
        "পুষ্যা": "সহযোগিতা ও সময়োপযোগী সিদ্ধান্ত গ্রহণ সম্ভব।",
        "অশ্লেষা": "সতর্কতার সাথে সম্পর্ক সামলান।",
        "মঘা": "সম্মান ও পুরস্কারের সম্ভাবনা আছে।",
    }
)
