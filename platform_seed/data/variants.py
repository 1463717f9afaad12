"""업종별 샘플 조직, 역할, 사용자.

Industry sample organizations (finance, healthcare, manufacturing,
government, non-profit, education, retail). Each industry gets its own small
organization tree, team roles named after the industry roles in
``data/industry.py`` and one sample user per role. Organizations are listed
parents-first; ``parent`` references an earlier entry by key.
"""

from datetime import date
from decimal import Decimal

VARIANT_ORGANIZATIONS: list[dict] = [
    # 금융 — Financial services
    {
        "key": "finance_holding",
        "parent": None,
        "organization_code": "VFIN001",
        "name": "Global Finance Holdings",
        "organization_type": "holding_company",
        "description": "Leading financial services holding company",
        "address": "100 Wall Street, New York, NY 10005",
        "phone": "+1-212-555-1000",
        "email": "info@globalfinance.com",
        "website": "https://globalfinance.com",
        "registration_number": "FIN-REG-001",
        "tax_number": "FIN-TAX-001",
        "governance_structure": {
            "board_size": 12,
            "independent_directors": 8,
            "committees": ["audit", "risk", "nomination", "remuneration", "compliance"],
        },
        "authorized_capital": Decimal("50000000.00"),
        "paid_capital": Decimal("40000000.00"),
        "establishment_date": date(2015, 1, 1),
        "legal_status": "Public Limited Company",
        "business_activities": "Banking, investment services, insurance",
        "contact_persons": {
            "chairman": {"name": "Robert Sterling", "email": "chairman@globalfinance.com"},
            "ceo": {"name": "Patricia Wells", "email": "ceo@globalfinance.com"},
            "cfo": {"name": "Michael Chen", "email": "cfo@globalfinance.com"},
        },
    },
    {
        "key": "commercial_bank",
        "parent": "finance_holding",
        "organization_code": "VFIN002",
        "name": "Global Commercial Bank",
        "organization_type": "subsidiary",
        "description": "Full-service commercial banking",
        "address": "150 Financial District, New York, NY 10006",
        "phone": "+1-212-555-2000",
        "email": "info@globalcommercialbank.com",
        "website": "https://globalcommercialbank.com",
        "registration_number": "BANK-001",
        "tax_number": "BANK-TAX-001",
        "establishment_date": date(2015, 6, 1),
        "legal_status": "Banking Corporation",
        "business_activities": "Commercial banking, lending, deposit services",
    },
    {
        "key": "investment_management",
        "parent": "finance_holding",
        "organization_code": "VFIN003",
        "name": "Global Investment Management",
        "organization_type": "subsidiary",
        "description": "Asset management and investment services",
        "address": "200 Investment Plaza, Boston, MA 02101",
        "phone": "+1-617-555-3000",
        "email": "info@globalinvestment.com",
        "website": "https://globalinvestment.com",
        "establishment_date": date(2016, 1, 1),
        "legal_status": "Investment Advisory Company",
        "business_activities": "Asset management, portfolio management, investment advisory",
    },
    # 의료 — Healthcare
    {
        "key": "healthcare_system",
        "parent": None,
        "organization_code": "VHC001",
        "name": "Regional Healthcare System",
        "organization_type": "holding_company",
        "description": "Integrated healthcare delivery system",
        "address": "500 Medical Center Drive, Chicago, IL 60611",
        "phone": "+1-312-555-5000",
        "email": "info@regionalhealthcare.org",
        "website": "https://regionalhealthcare.org",
        "registration_number": "HC-REG-001",
        "tax_number": "HC-TAX-001",
        "establishment_date": date(2010, 1, 1),
        "legal_status": "Non-Profit Healthcare System",
        "business_activities": "Healthcare delivery, medical education, research",
        "contact_persons": {
            "ceo": {"name": "Dr. Maria Rodriguez", "email": "ceo@regionalhealthcare.org"},
            "cmo": {"name": "Dr. James Patterson", "email": "cmo@regionalhealthcare.org"},
        },
    },
    {
        "key": "medical_center",
        "parent": "healthcare_system",
        "organization_code": "VHC002",
        "name": "Regional Medical Center",
        "organization_type": "subsidiary",
        "description": "Tertiary care academic medical center",
        "address": "500 Medical Center Drive, Chicago, IL 60611",
        "phone": "+1-312-555-5100",
        "email": "info@regionalmedcenter.org",
        "establishment_date": date(2010, 1, 1),
        "legal_status": "Hospital",
        "business_activities": "Inpatient care, emergency services, specialty care",
    },
    {
        "key": "community_clinic",
        "parent": "healthcare_system",
        "organization_code": "VHC003",
        "name": "Community Health Clinic",
        "organization_type": "branch",
        "description": "Primary care and preventive services",
        "address": "1200 Community Way, Chicago, IL 60612",
        "phone": "+1-312-555-5200",
        "email": "info@communityhealthclinic.org",
        "establishment_date": date(2012, 1, 1),
        "legal_status": "Clinic",
        "business_activities": "Primary care, preventive medicine, community health",
    },
    # 제조 — Manufacturing
    {
        "key": "manufacturing_group",
        "parent": None,
        "organization_code": "VMFG001",
        "name": "Advanced Manufacturing Group",
        "organization_type": "holding_company",
        "description": "Diversified manufacturing conglomerate",
        "address": "2000 Industrial Boulevard, Detroit, MI 48201",
        "phone": "+1-313-555-7000",
        "email": "info@advancedmfg.com",
        "website": "https://advancedmfg.com",
        "establishment_date": date(2005, 1, 1),
        "legal_status": "Manufacturing Corporation",
        "business_activities": "Automotive parts, aerospace components, industrial equipment",
    },
    {
        "key": "automotive_division",
        "parent": "manufacturing_group",
        "organization_code": "VMFG002",
        "name": "Automotive Components Division",
        "organization_type": "division",
        "description": "Precision automotive components manufacturing",
        "address": "2000 Industrial Boulevard, Detroit, MI 48201",
        "phone": "+1-313-555-7100",
        "email": "automotive@advancedmfg.com",
        "establishment_date": date(2005, 1, 1),
        "legal_status": "Manufacturing Division",
        "business_activities": "Engine parts, transmission components, brake systems",
    },
    # 공공 — Government
    {
        "key": "digital_services",
        "parent": None,
        "organization_code": "VGOV001",
        "name": "Department of Digital Services",
        "organization_type": "department",
        "description": "State government digital transformation agency",
        "address": "1 Government Plaza, Sacramento, CA 95814",
        "phone": "+1-916-555-8000",
        "email": "info@digitalservices.ca.gov",
        "website": "https://digitalservices.ca.gov",
        "establishment_date": date(2020, 1, 1),
        "legal_status": "Government Agency",
        "business_activities": "Digital government services, IT infrastructure, citizen services",
    },
    # 비영리 — Non-profit
    {
        "key": "community_foundation",
        "parent": None,
        "organization_code": "VNPO001",
        "name": "Community Development Foundation",
        "organization_type": "unit",
        "description": "Community development and social services",
        "address": "300 Nonprofit Way, Austin, TX 78701",
        "phone": "+1-512-555-9000",
        "email": "info@communityfoundation.org",
        "website": "https://communityfoundation.org",
        "establishment_date": date(2008, 1, 1),
        "legal_status": "501(c)(3) Non-Profit",
        "business_activities": "Community development, education programs, social services",
    },
    # 교육 — Education
    {
        "key": "metro_university",
        "parent": None,
        "organization_code": "VEDU001",
        "name": "Metropolitan State University",
        "organization_type": "unit",
        "description": "Public research university",
        "address": "1000 University Drive, Denver, CO 80204",
        "phone": "+1-303-555-2000",
        "email": "info@metrostate.edu",
        "website": "https://metrostate.edu",
        "establishment_date": date(1965, 1, 1),
        "legal_status": "Public University",
        "business_activities": "Higher education, research, community service",
    },
    # 유통 — Retail
    {
        "key": "retail_hq",
        "parent": None,
        "organization_code": "VRTL001",
        "name": "Metro Retail Chain",
        "organization_type": "holding_company",
        "description": "Regional retail chain headquarters",
        "address": "5000 Commerce Center, Atlanta, GA 30309",
        "phone": "+1-404-555-6000",
        "email": "info@metroretail.com",
        "website": "https://metroretail.com",
        "establishment_date": date(1995, 1, 1),
        "legal_status": "Retail Corporation",
        "business_activities": "Retail operations, merchandising, supply chain",
    },
    {
        "key": "retail_southeast",
        "parent": "retail_hq",
        "organization_code": "VRTL002",
        "name": "Southeast Region",
        "organization_type": "division",
        "description": "Southeast regional operations",
        "address": "5000 Commerce Center, Atlanta, GA 30309",
        "phone": "+1-404-555-6100",
        "email": "southeast@metroretail.com",
        "establishment_date": date(1995, 1, 1),
        "legal_status": "Regional Division",
        "business_activities": "Store operations, regional management",
    },
]

# 팀 역할과 해당 역할을 받는 샘플 사용자 — Team role per organization and the user holding it
VARIANT_ROLE_ASSIGNMENTS: list[dict] = [
    # 금융
    {"organization": "commercial_bank", "role": "Banking Manager",
     "name": "Jennifer Banks", "username": "j.banks", "email": "j.banks@globalcommercialbank.com"},
    {"organization": "commercial_bank", "role": "Loan Officer",
     "name": "Thomas Credit", "username": "t.credit", "email": "t.credit@globalcommercialbank.com"},
    {"organization": "investment_management", "role": "Portfolio Manager",
     "name": "Alexandra Portfolio", "username": "a.portfolio", "email": "a.portfolio@globalinvestment.com"},
    # 의료
    {"organization": "healthcare_system", "role": "Chief Medical Officer",
     "name": "Dr. Sarah Medical", "username": "dr.medical", "email": "dr.medical@regionalhealthcare.org"},
    {"organization": "medical_center", "role": "Attending Physician",
     "name": "Dr. John Attending", "username": "dr.attending", "email": "dr.attending@regionalmedcenter.org"},
    {"organization": "medical_center", "role": "Nurse Manager",
     "name": "Mary Nurse", "username": "m.nurse", "email": "m.nurse@regionalmedcenter.org"},
    # 제조
    {"organization": "automotive_division", "role": "Plant Manager",
     "name": "Robert Plant", "username": "r.plant", "email": "r.plant@advancedmfg.com"},
    {"organization": "automotive_division", "role": "Quality Manager",
     "name": "Lisa Quality", "username": "l.quality", "email": "l.quality@advancedmfg.com"},
    {"organization": "automotive_division", "role": "Production Supervisor",
     "name": "Mike Production", "username": "m.production", "email": "m.production@advancedmfg.com"},
    # 공공
    {"organization": "digital_services", "role": "Department Director",
     "name": "Patricia Director", "username": "p.director", "email": "p.director@digitalservices.ca.gov"},
    {"organization": "digital_services", "role": "Program Manager",
     "name": "James Program", "username": "j.program", "email": "j.program@digitalservices.ca.gov"},
    {"organization": "digital_services", "role": "Civil Servant",
     "name": "Angela Service", "username": "a.service", "email": "a.service@digitalservices.ca.gov"},
    # 비영리
    {"organization": "community_foundation", "role": "Executive Director",
     "name": "Maria Executive", "username": "m.executive", "email": "m.executive@communityfoundation.org"},
    {"organization": "community_foundation", "role": "Program Coordinator",
     "name": "David Coordinator", "username": "d.coordinator", "email": "d.coordinator@communityfoundation.org"},
    {"organization": "community_foundation", "role": "Volunteer",
     "name": "Susan Volunteer", "username": "s.volunteer", "email": "s.volunteer@communityfoundation.org"},
    # 교육
    {"organization": "metro_university", "role": "University President",
     "name": "Dr. Richard President", "username": "dr.president", "email": "dr.president@metrostate.edu"},
    {"organization": "metro_university", "role": "Dean",
     "name": "Dr. Linda Dean", "username": "dr.dean", "email": "dr.dean@metrostate.edu"},
    {"organization": "metro_university", "role": "Professor",
     "name": "Dr. Michael Professor", "username": "dr.professor", "email": "dr.professor@metrostate.edu"},
    {"organization": "metro_university", "role": "Student",
     "name": "Emily Student", "username": "e.student", "email": "e.student@student.metrostate.edu"},
    # 유통
    {"organization": "retail_southeast", "role": "Regional Manager",
     "name": "Carol Regional", "username": "c.regional", "email": "c.regional@metroretail.com"},
    {"organization": "retail_southeast", "role": "Store Manager",
     "name": "Kevin Store", "username": "k.store", "email": "k.store@metroretail.com"},
    {"organization": "retail_southeast", "role": "Sales Associate",
     "name": "Ashley Sales", "username": "a.sales", "email": "a.sales@metroretail.com"},
]
