"""Hand-curated lookup tables for résumé extraction.

All tables are immutable and shared read-only across threads.
"""

# Known hospitals in the Philippines (partial list); spelling here is canonical
KNOWN_HOSPITALS: tuple[str, ...] = (
    "St. Luke's Medical Center",
    "St. Luke's",
    "Makati Medical Center",
    "The Medical City",
    "Philippine General Hospital",
    "PGH",
    "Philippine Heart Center",
    "National Kidney Institute",
    "Veterans Memorial Medical Center",
    "East Avenue Medical Center",
    "Quezon City General Hospital",
    "Manila Doctors Hospital",
    "Asian Hospital",
    "Cardinal Santos Medical Center",
    "Chong Hua Hospital",
    "Cebu Doctors",
    "Cebu Doctors' University Hospital",
    "Vicente Sotto Memorial Medical Center",
    "Davao Doctors Hospital",
    "Southern Philippines Medical Center",
    "Baguio General Hospital",
    "Jose B. Lingad Memorial",
    "Ospital ng Maynila",
    "UP-PGH",
    "UST Hospital",
    "FEU-NRMF Medical Center",
)

# Common clinical nursing skills
CLINICAL_SKILLS: tuple[str, ...] = (
    "Patient Assessment",
    "IV Therapy",
    "Medication Administration",
    "Wound Care",
    "Vital Signs",
    "Patient Education",
    "Critical Care",
    "Emergency Response",
    "Infection Control",
    "Documentation",
    "Perioperative Nursing",
    "Geriatric Care",
    "Pediatric Nursing",
    "Obstetric Nursing",
    "Psychiatric Nursing",
    "Surgical Nursing",
    "Cardiac Monitoring",
    "Ventilator Management",
    "Hemodynamic Monitoring",
    "Tracheostomy Care",
    "Blood Transfusion",
    "Catheterization",
    "CPR",
    "BLS",
    "ACLS",
    "Sterile Technique",
    "Chemotherapy Administration",
    "Dialysis",
    "Triage",
    "Health Assessment",
    "Care Planning",
    "Discharge Planning",
    "Patient Advocacy",
    "Clinical Documentation",
    "EHR",
    "Electronic Health Records",
    "Telemetry",
)

# Nursing position titles, longest first so "Staff Nurse" wins over "RN"
POSITION_TITLES: tuple[str, ...] = tuple(sorted(
    (
        "Staff Nurse",
        "Head Nurse",
        "Charge Nurse",
        "Nurse Supervisor",
        "Clinical Nurse",
        "OR Nurse",
        "ER Nurse",
        "ICU Nurse",
        "Ward Nurse",
        "Private Duty Nurse",
        "Nurse Manager",
        "Nurse Educator",
        "Registered Nurse",
        "RN",
        "Medical-Surgical Nurse",
    ),
    key=len,
    reverse=True,
))

# Keywords that mark a line in a certifications section as a certification
CERTIFICATION_KEYWORDS: tuple[str, ...] = (
    "certified",
    "certificate",
    "certification",
    "license",
    "licensure",
    "training",
    "course",
    "seminar",
    "workshop",
    "pals",
    "nrp",
    "tncc",
    "ccrn",
    "iv therapy",
)

# Section sub-labels that look like headers but belong to the enclosing section
SUBSECTION_LABELS: frozenset[str] = frozenset({
    "tertiary",
    "secondary",
    "primary",
    "elementary",
    "graduate studies",
    "post graduate",
    "postgraduate",
    "undergraduate",
    "college",
    "high school",
    "senior high school",
    "junior high school",
    "vocational",
})

# City / region suffixes stripped from institution names
INSTITUTION_CITY_SUFFIXES: tuple[str, ...] = (
    "Manila", "Quezon", "Cebu", "Davao", "Philippines",
    "USA", "UK", "Canada", "Australia", "Singapore",
)

# Keywords that make a "Capitalized, Capitalized" line a location
LOCATION_KEYWORDS: tuple[str, ...] = (
    "City", "Province", "State", "Philippines", "USA", "UK", "Canada",
    "Australia", "Singapore", "Malaysia", "Quezon", "Manila", "Cebu",
    "Davao", "Negros", "Occidental", "Oriental",
)

# Keywords that make a comma-separated header line an address
ADDRESS_KEYWORDS: tuple[str, ...] = (
    "City", "Quezon", "Manila", "Cebu", "Davao", "Makati", "Taguig",
    "Pasig", "Philippines", "Negros", "Occidental",
)

# Hospital units recognised as departments
DEPARTMENT_UNITS: tuple[str, ...] = (
    "Emergency Room", "Operating Room", "Delivery Room", "Recovery Room",
    "NICU", "PICU", "ICU", "CCU", "ER", "OR",
)
