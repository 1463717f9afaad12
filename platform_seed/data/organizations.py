"""샘플 조직 트리 및 조직 단위.

Sample organization hierarchy (TechCorp Holdings and its subsidiaries,
divisions and branches) and the governance/operational units of the first
three companies. Entries are listed parents-first; ``parent`` and
``parent_unit`` reference earlier entries by key.
"""

from datetime import date
from decimal import Decimal

ORGANIZATIONS: list[dict] = [
    {
        "key": "techcorp_holdings",
        "parent": None,
        "organization_code": "HC001",
        "name": "TechCorp Holdings",
        "organization_type": "holding_company",
        "description": "Main holding company for technology businesses",
        "address": "123 Tech Street, Innovation District",
        "phone": "+1-555-0100",
        "email": "info@techcorp.com",
        "website": "https://techcorp.com",
        "registration_number": "REG001",
        "tax_number": "TAX001",
        "governance_structure": {
            "board_size": 7,
            "independent_directors": 4,
            "committees": ["audit", "risk", "nomination", "remuneration"],
        },
        "authorized_capital": Decimal("10000000.00"),
        "paid_capital": Decimal("8500000.00"),
        "establishment_date": date(2020, 1, 15),
        "legal_status": "Public Limited Company",
        "business_activities": "Investment holding and management",
        "contact_persons": {
            "ceo": {"name": "John Smith", "email": "ceo@techcorp.com"},
            "cfo": {"name": "Jane Doe", "email": "cfo@techcorp.com"},
        },
    },
    {
        "key": "techcorp_software",
        "parent": "techcorp_holdings",
        "organization_code": "SUB001",
        "name": "TechCorp Software",
        "organization_type": "subsidiary",
        "description": "Software development and consulting services",
        "address": "456 Software Ave, Tech City",
        "phone": "+1-555-0200",
        "email": "info@techcorpsoftware.com",
        "website": "https://techcorpsoftware.com",
        "registration_number": "REG002",
        "tax_number": "TAX002",
        "governance_structure": {"board_size": 5, "independent_directors": 2, "committees": ["audit", "risk"]},
        "authorized_capital": Decimal("5000000.00"),
        "paid_capital": Decimal("4000000.00"),
        "establishment_date": date(2021, 3, 1),
        "legal_status": "Private Limited Company",
        "business_activities": "Software development, web applications, mobile apps",
        "contact_persons": {
            "managing_director": {"name": "Mike Johnson", "email": "md@techcorpsoftware.com"},
            "cto": {"name": "Sarah Wilson", "email": "cto@techcorpsoftware.com"},
        },
    },
    {
        "key": "techcorp_data",
        "parent": "techcorp_holdings",
        "organization_code": "SUB002",
        "name": "TechCorp Data",
        "organization_type": "subsidiary",
        "description": "Data analytics and AI solutions",
        "address": "789 Data Drive, Analytics Park",
        "phone": "+1-555-0300",
        "email": "info@techcorpdata.com",
        "website": "https://techcorpdata.com",
        "registration_number": "REG003",
        "tax_number": "TAX003",
        "governance_structure": {"board_size": 5, "independent_directors": 2, "committees": ["audit", "risk"]},
        "authorized_capital": Decimal("3000000.00"),
        "paid_capital": Decimal("2500000.00"),
        "establishment_date": date(2021, 6, 15),
        "legal_status": "Private Limited Company",
        "business_activities": "Data analytics, machine learning, AI consulting",
        "contact_persons": {
            "managing_director": {"name": "David Brown", "email": "md@techcorpdata.com"},
            "head_of_ai": {"name": "Emily Davis", "email": "ai@techcorpdata.com"},
        },
    },
    {
        "key": "enterprise_division",
        "parent": "techcorp_software",
        "organization_code": "DIV001",
        "name": "Enterprise Solutions Division",
        "organization_type": "division",
        "description": "Enterprise software solutions and services",
        "address": "456 Software Ave, Tech City",
        "phone": "+1-555-0201",
        "email": "enterprise@techcorpsoftware.com",
        "website": "https://techcorpsoftware.com/enterprise",
        "establishment_date": date(2022, 1, 1),
        "legal_status": "Division",
        "business_activities": "Enterprise software development and implementation",
        "contact_persons": {
            "division_head": {"name": "Robert Taylor", "email": "robert.taylor@techcorpsoftware.com"},
        },
    },
    {
        "key": "mobile_division",
        "parent": "techcorp_software",
        "organization_code": "DIV002",
        "name": "Mobile Solutions Division",
        "organization_type": "division",
        "description": "Mobile application development and services",
        "address": "456 Software Ave, Tech City",
        "phone": "+1-555-0202",
        "email": "mobile@techcorpsoftware.com",
        "website": "https://techcorpsoftware.com/mobile",
        "establishment_date": date(2022, 1, 1),
        "legal_status": "Division",
        "business_activities": "iOS and Android application development",
        "contact_persons": {
            "division_head": {"name": "Lisa Anderson", "email": "lisa.anderson@techcorpsoftware.com"},
        },
    },
    {
        "key": "techcorp_cloud",
        "parent": "techcorp_holdings",
        "organization_code": "SUB003",
        "name": "TechCorp Cloud",
        "organization_type": "subsidiary",
        "description": "Cloud infrastructure and services",
        "address": "321 Cloud Way, Server City",
        "phone": "+1-555-0400",
        "email": "info@techcorpcloud.com",
        "website": "https://techcorpcloud.com",
        "registration_number": "REG004",
        "tax_number": "TAX004",
        "governance_structure": {"board_size": 3, "independent_directors": 1, "committees": ["audit"]},
        "authorized_capital": Decimal("2000000.00"),
        "paid_capital": Decimal("1800000.00"),
        "establishment_date": date(2022, 1, 1),
        "legal_status": "Private Limited Company",
        "business_activities": "Cloud hosting, infrastructure services, DevOps",
        "contact_persons": {
            "managing_director": {"name": "Chris Wilson", "email": "md@techcorpcloud.com"},
            "head_of_ops": {"name": "Amanda Lee", "email": "ops@techcorpcloud.com"},
        },
    },
    {
        "key": "techcorp_security",
        "parent": "techcorp_holdings",
        "organization_code": "SUB004",
        "name": "TechCorp Security",
        "organization_type": "subsidiary",
        "description": "Cybersecurity and information security services",
        "address": "555 Security Blvd, Safe Harbor",
        "phone": "+1-555-0500",
        "email": "info@techcorpsecurity.com",
        "website": "https://techcorpsecurity.com",
        "registration_number": "REG005",
        "tax_number": "TAX005",
        "governance_structure": {"board_size": 3, "independent_directors": 1, "committees": ["audit", "risk"]},
        "authorized_capital": Decimal("1500000.00"),
        "paid_capital": Decimal("1200000.00"),
        "establishment_date": date(2022, 3, 1),
        "legal_status": "Private Limited Company",
        "business_activities": "Security auditing, penetration testing, SIEM solutions",
        "contact_persons": {
            "managing_director": {"name": "Ryan Garcia", "email": "md@techcorpsecurity.com"},
            "ciso": {"name": "Michelle Park", "email": "ciso@techcorpsecurity.com"},
        },
    },
    {
        "key": "software_europe",
        "parent": "techcorp_software",
        "organization_code": "BR001",
        "name": "TechCorp Software Europe",
        "organization_type": "branch",
        "description": "European operations for software development",
        "address": "10 Tech Park, London, UK",
        "phone": "+44-20-7555-0100",
        "email": "europe@techcorpsoftware.com",
        "website": "https://techcorpsoftware.com/europe",
        "registration_number": "UK001",
        "tax_number": "UKTAX001",
        "establishment_date": date(2023, 1, 1),
        "legal_status": "Branch Office",
        "business_activities": "Software development for European market",
        "contact_persons": {
            "branch_manager": {"name": "Oliver Smith", "email": "oliver.smith@techcorpsoftware.com"},
        },
    },
    {
        "key": "software_asia",
        "parent": "techcorp_software",
        "organization_code": "BR002",
        "name": "TechCorp Software Asia",
        "organization_type": "branch",
        "description": "Asian operations for software development",
        "address": "25 Innovation Street, Singapore",
        "phone": "+65-6555-0100",
        "email": "asia@techcorpsoftware.com",
        "website": "https://techcorpsoftware.com/asia",
        "registration_number": "SG001",
        "tax_number": "SGTAX001",
        "establishment_date": date(2023, 6, 1),
        "legal_status": "Branch Office",
        "business_activities": "Software development for Asian market",
        "contact_persons": {
            "branch_manager": {"name": "Li Wei", "email": "li.wei@techcorpsoftware.com"},
        },
    },
    {
        "key": "cloud_services_division",
        "parent": "techcorp_cloud",
        "organization_code": "DIV003",
        "name": "Cloud Services Division",
        "organization_type": "division",
        "description": "Cloud platform and infrastructure services",
        "address": "321 Cloud Way, Server City",
        "phone": "+1-555-0401",
        "email": "cloudservices@techcorpcloud.com",
        "website": "https://techcorpcloud.com/services",
        "establishment_date": date(2022, 2, 1),
        "legal_status": "Division",
        "business_activities": "IaaS, PaaS, SaaS platform development",
        "contact_persons": {
            "division_head": {"name": "Tom Johnson", "email": "tom.johnson@techcorpcloud.com"},
        },
    },
    {
        "key": "devops_division",
        "parent": "techcorp_cloud",
        "organization_code": "DIV004",
        "name": "DevOps Division",
        "organization_type": "division",
        "description": "DevOps consulting and automation services",
        "address": "321 Cloud Way, Server City",
        "phone": "+1-555-0402",
        "email": "devops@techcorpcloud.com",
        "website": "https://techcorpcloud.com/devops",
        "establishment_date": date(2022, 4, 1),
        "legal_status": "Division",
        "business_activities": "CI/CD pipeline setup, container orchestration, monitoring",
        "contact_persons": {
            "division_head": {"name": "Kevin Brown", "email": "kevin.brown@techcorpcloud.com"},
        },
    },
    {
        "key": "pentest_division",
        "parent": "techcorp_security",
        "organization_code": "DIV005",
        "name": "Penetration Testing Division",
        "organization_type": "division",
        "description": "Ethical hacking and penetration testing services",
        "address": "555 Security Blvd, Safe Harbor",
        "phone": "+1-555-0501",
        "email": "pentest@techcorpsecurity.com",
        "website": "https://techcorpsecurity.com/pentest",
        "establishment_date": date(2022, 5, 1),
        "legal_status": "Division",
        "business_activities": "Security assessments, vulnerability testing, red team exercises",
        "contact_persons": {
            "division_head": {"name": "Alex Rodriguez", "email": "alex.rodriguez@techcorpsecurity.com"},
        },
    },
    {
        "key": "compliance_division",
        "parent": "techcorp_security",
        "organization_code": "DIV006",
        "name": "Compliance & Audit Division",
        "organization_type": "division",
        "description": "Security compliance and audit services",
        "address": "555 Security Blvd, Safe Harbor",
        "phone": "+1-555-0502",
        "email": "compliance@techcorpsecurity.com",
        "website": "https://techcorpsecurity.com/compliance",
        "establishment_date": date(2022, 7, 1),
        "legal_status": "Division",
        "business_activities": "SOC2, ISO27001, HIPAA compliance auditing",
        "contact_persons": {
            "division_head": {"name": "Sarah Kim", "email": "sarah.kim@techcorpsecurity.com"},
        },
    },
]

ORGANIZATION_UNITS: list[dict] = [
    # TechCorp Holdings — 지배구조 단위 (Governance units)
    {
        "key": "board_of_commissioners",
        "organization": "techcorp_holdings",
        "parent_unit": None,
        "unit_code": "BOC001",
        "name": "Board of Commissioners",
        "unit_type": "board_of_commissioners",
        "description": "Supervisory board responsible for oversight and strategic guidance",
        "responsibilities": [
            "Strategic oversight", "Risk management oversight",
            "Appointment of board of directors", "Approval of major corporate actions",
        ],
        "authorities": [
            "Approve annual budget", "Appoint and dismiss directors",
            "Approve major investments", "Set executive compensation",
        ],
        "sort_order": 1,
    },
    {
        "key": "board_of_directors",
        "organization": "techcorp_holdings",
        "parent_unit": None,
        "unit_code": "BOD001",
        "name": "Board of Directors",
        "unit_type": "board_of_directors",
        "description": "Executive board responsible for day-to-day management",
        "responsibilities": [
            "Corporate management", "Strategic execution",
            "Financial performance", "Operational oversight",
        ],
        "authorities": [
            "Execute business strategy", "Manage operations",
            "Make operational decisions", "Report to commissioners",
        ],
        "sort_order": 2,
    },
    {
        "key": "audit_committee",
        "organization": "techcorp_holdings",
        "parent_unit": "board_of_commissioners",
        "unit_code": "AC001",
        "name": "Audit Committee",
        "unit_type": "audit_committee",
        "description": "Committee responsible for financial reporting and audit oversight",
        "responsibilities": [
            "Financial reporting oversight", "Internal audit supervision",
            "External auditor management", "Compliance monitoring",
        ],
        "authorities": [
            "Review financial statements", "Appoint internal auditors",
            "Review audit findings", "Recommend corrective actions",
        ],
        "sort_order": 3,
    },
    {
        "key": "risk_committee",
        "organization": "techcorp_holdings",
        "parent_unit": "board_of_commissioners",
        "unit_code": "RC001",
        "name": "Risk Committee",
        "unit_type": "risk_committee",
        "description": "Committee responsible for risk management oversight",
        "responsibilities": [
            "Risk strategy oversight", "Risk appetite setting",
            "Risk monitoring", "Crisis management",
        ],
        "authorities": [
            "Set risk policies", "Review risk reports",
            "Approve risk limits", "Escalate major risks",
        ],
        "sort_order": 4,
    },
    # TechCorp Software — 운영 단위 (Operational units)
    {
        "key": "executive_office",
        "organization": "techcorp_software",
        "parent_unit": None,
        "unit_code": "EXEC001",
        "name": "Executive Office",
        "unit_type": "department",
        "description": "Executive leadership and strategic management",
        "responsibilities": [
            "Strategic planning", "Corporate governance",
            "Stakeholder management", "Executive decision making",
        ],
        "authorities": [
            "Set company direction", "Approve major decisions",
            "Represent company externally", "Allocate resources",
        ],
        "sort_order": 1,
    },
    {
        "key": "engineering_division",
        "organization": "techcorp_software",
        "parent_unit": None,
        "unit_code": "ENG001",
        "name": "Engineering Division",
        "unit_type": "division",
        "description": "Software engineering and development",
        "responsibilities": [
            "Software development", "Technical architecture",
            "Code quality assurance", "Development methodology",
        ],
        "authorities": [
            "Define technical standards", "Approve technical designs",
            "Manage development teams", "Release software products",
        ],
        "sort_order": 2,
    },
    {
        "key": "frontend_team",
        "organization": "techcorp_software",
        "parent_unit": "engineering_division",
        "unit_code": "FEND001",
        "name": "Frontend Development Team",
        "unit_type": "team",
        "description": "User interface and user experience development",
        "responsibilities": [
            "UI/UX development", "Frontend architecture",
            "User interaction design", "Frontend testing",
        ],
        "authorities": [
            "Choose frontend frameworks", "Design user interfaces",
            "Implement frontend features", "Optimize user experience",
        ],
        "sort_order": 1,
    },
    {
        "key": "backend_team",
        "organization": "techcorp_software",
        "parent_unit": "engineering_division",
        "unit_code": "BEND001",
        "name": "Backend Development Team",
        "unit_type": "team",
        "description": "Server-side development and API services",
        "responsibilities": [
            "API development", "Database design",
            "Server architecture", "Backend testing",
        ],
        "authorities": [
            "Design database schemas", "Implement business logic",
            "Develop APIs", "Optimize performance",
        ],
        "sort_order": 2,
    },
    {
        "key": "qa_department",
        "organization": "techcorp_software",
        "parent_unit": None,
        "unit_code": "QA001",
        "name": "Quality Assurance Department",
        "unit_type": "department",
        "description": "Software testing and quality control",
        "responsibilities": [
            "Test planning", "Test execution", "Bug reporting", "Quality metrics",
        ],
        "authorities": [
            "Approve software releases", "Define testing standards",
            "Block defective releases", "Report quality metrics",
        ],
        "sort_order": 3,
    },
    {
        "key": "hr_department",
        "organization": "techcorp_software",
        "parent_unit": None,
        "unit_code": "HR001",
        "name": "Human Resources",
        "unit_type": "department",
        "description": "Human resource management and development",
        "responsibilities": [
            "Talent acquisition", "Employee development",
            "Performance management", "HR policy implementation",
        ],
        "authorities": [
            "Hire employees", "Conduct performance reviews",
            "Implement HR policies", "Manage compensation",
        ],
        "sort_order": 4,
    },
    # TechCorp Data — 운영 단위 (Operational units)
    {
        "key": "ai_research_division",
        "organization": "techcorp_data",
        "parent_unit": None,
        "unit_code": "AI001",
        "name": "AI Research Division",
        "unit_type": "division",
        "description": "Artificial intelligence research and development",
        "responsibilities": [
            "AI research", "Machine learning development",
            "Algorithm optimization", "AI product development",
        ],
        "authorities": [
            "Conduct research projects", "Develop AI models",
            "Publish research findings", "Collaborate with academia",
        ],
        "sort_order": 1,
    },
    {
        "key": "data_analytics_department",
        "organization": "techcorp_data",
        "parent_unit": None,
        "unit_code": "DATA001",
        "name": "Data Analytics Department",
        "unit_type": "department",
        "description": "Data analysis and business intelligence",
        "responsibilities": [
            "Data analysis", "Business intelligence",
            "Data visualization", "Reporting and insights",
        ],
        "authorities": [
            "Access company data", "Generate reports",
            "Provide recommendations", "Implement analytics solutions",
        ],
        "sort_order": 2,
    },
]

# 직급 단계 (Position levels), 1 = 최상위
POSITION_LEVELS: list[dict] = [
    {"code": "board_member", "name": "Board Member", "hierarchy_level": 1,
     "description": "Members of the board of commissioners or directors"},
    {"code": "c_level", "name": "C-Level Executive", "hierarchy_level": 2,
     "description": "Chief officers leading the organization"},
    {"code": "vice_president", "name": "Vice President", "hierarchy_level": 3,
     "description": "Leaders of major functions or divisions"},
    {"code": "director", "name": "Director", "hierarchy_level": 4,
     "description": "Heads of departments"},
    {"code": "senior_manager", "name": "Senior Manager", "hierarchy_level": 5,
     "description": "Managers overseeing several teams"},
    {"code": "manager", "name": "Manager", "hierarchy_level": 6,
     "description": "Team and department managers"},
    {"code": "senior_staff", "name": "Senior Staff", "hierarchy_level": 7,
     "description": "Experienced individual contributors"},
    {"code": "staff", "name": "Staff", "hierarchy_level": 8,
     "description": "Individual contributors"},
]

ORGANIZATION_POSITIONS: list[dict] = [
    {
        "key": "chairman_commissioners",
        "unit": "board_of_commissioners",
        "level": "board_member",
        "position_code": "POS001",
        "title": "Chairman of Board of Commissioners",
        "job_description": "Lead the board of commissioners and ensure effective governance oversight",
        "qualifications": [
            "Minimum 15 years of executive experience",
            "Strong leadership and governance experience",
            "Understanding of corporate governance principles",
            "Board certification preferred",
        ],
        "responsibilities": [
            "Chair board meetings", "Provide strategic oversight",
            "Ensure compliance with regulations", "Evaluate board performance",
        ],
        "min_salary": Decimal("500000.00"),
        "max_salary": Decimal("800000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "commissioner",
        "unit": "board_of_commissioners",
        "level": "board_member",
        "position_code": "POS002",
        "title": "Commissioner",
        "job_description": "Provide governance oversight and strategic guidance",
        "qualifications": [
            "Minimum 10 years of senior management experience",
            "Relevant industry knowledge",
            "Strong analytical and strategic thinking skills",
            "Board experience preferred",
        ],
        "responsibilities": [
            "Participate in board meetings", "Review strategic plans",
            "Monitor risk management", "Ensure regulatory compliance",
        ],
        "min_salary": Decimal("300000.00"),
        "max_salary": Decimal("500000.00"),
        "max_incumbents": 4,
    },
    {
        "key": "ceo",
        "unit": "board_of_directors",
        "level": "c_level",
        "position_code": "POS003",
        "title": "Chief Executive Officer",
        "job_description": "Lead the organization and execute strategic initiatives",
        "qualifications": [
            "MBA or equivalent advanced degree",
            "Minimum 15 years of executive experience",
            "Proven track record in technology industry",
            "Strong leadership and communication skills",
        ],
        "responsibilities": [
            "Develop and execute corporate strategy", "Lead executive team",
            "Represent company to stakeholders", "Drive business growth and profitability",
        ],
        "min_salary": Decimal("800000.00"),
        "max_salary": Decimal("1500000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "cfo",
        "unit": "board_of_directors",
        "level": "c_level",
        "position_code": "POS004",
        "title": "Chief Financial Officer",
        "job_description": "Manage financial strategy and operations",
        "qualifications": [
            "CPA or equivalent professional certification",
            "Minimum 12 years of finance experience",
            "Experience in public companies preferred",
            "Strong analytical and strategic skills",
        ],
        "responsibilities": [
            "Oversee financial planning and analysis", "Manage investor relations",
            "Ensure regulatory compliance", "Lead finance team",
        ],
        "min_salary": Decimal("600000.00"),
        "max_salary": Decimal("1000000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "managing_director",
        "unit": "executive_office",
        "level": "c_level",
        "position_code": "POS005",
        "title": "Managing Director",
        "job_description": "Lead TechCorp Software operations and strategic execution",
        "qualifications": [
            "Advanced degree in business or technology",
            "Minimum 12 years of software industry experience",
            "Strong leadership and management skills",
            "Proven track record in business growth",
        ],
        "responsibilities": [
            "Execute business strategy", "Manage day-to-day operations",
            "Lead management team", "Drive revenue growth",
        ],
        "min_salary": Decimal("400000.00"),
        "max_salary": Decimal("700000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "cto",
        "unit": "executive_office",
        "level": "c_level",
        "position_code": "POS006",
        "title": "Chief Technology Officer",
        "job_description": "Lead technology strategy and innovation",
        "qualifications": [
            "Computer Science or Engineering degree",
            "Minimum 10 years of technology leadership experience",
            "Strong technical and management skills",
            "Experience with enterprise software development",
        ],
        "responsibilities": [
            "Define technology strategy", "Lead engineering teams",
            "Drive technical innovation", "Ensure technology excellence",
        ],
        "min_salary": Decimal("350000.00"),
        "max_salary": Decimal("600000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "vp_engineering",
        "unit": "engineering_division",
        "level": "vice_president",
        "position_code": "POS007",
        "title": "Vice President of Engineering",
        "job_description": "Lead engineering organization and technical excellence",
        "qualifications": [
            "Computer Science or Engineering degree",
            "Minimum 8 years of engineering management experience",
            "Strong technical leadership skills",
            "Experience scaling engineering teams",
        ],
        "responsibilities": [
            "Lead engineering organization", "Drive technical excellence",
            "Manage engineering teams", "Define development processes",
        ],
        "min_salary": Decimal("250000.00"),
        "max_salary": Decimal("400000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "senior_frontend_dev",
        "unit": "frontend_team",
        "level": "senior_staff",
        "position_code": "POS008",
        "title": "Senior Frontend Developer",
        "job_description": "Lead frontend development and mentor team members",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 5 years of frontend development experience",
            "Expertise in React, TypeScript, and modern frontend technologies",
            "Strong problem-solving and communication skills",
        ],
        "responsibilities": [
            "Develop complex frontend features", "Mentor junior developers",
            "Define frontend architecture", "Ensure code quality and best practices",
        ],
        "min_salary": Decimal("120000.00"),
        "max_salary": Decimal("180000.00"),
        "max_incumbents": 3,
    },
    {
        "key": "frontend_dev",
        "unit": "frontend_team",
        "level": "staff",
        "position_code": "POS009",
        "title": "Frontend Developer",
        "job_description": "Develop and maintain frontend applications",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 2 years of frontend development experience",
            "Proficiency in HTML, CSS, JavaScript, and React",
            "Understanding of responsive design principles",
        ],
        "responsibilities": [
            "Implement UI components", "Collaborate with designers and backend developers",
            "Write clean, maintainable code", "Participate in code reviews",
        ],
        "min_salary": Decimal("80000.00"),
        "max_salary": Decimal("120000.00"),
        "max_incumbents": 5,
    },
    {
        "key": "senior_backend_dev",
        "unit": "backend_team",
        "level": "senior_staff",
        "position_code": "POS010",
        "title": "Senior Backend Developer",
        "job_description": "Lead backend development and system architecture",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 5 years of backend development experience",
            "Expertise in Python, databases, and API development",
            "Strong system design and architecture skills",
        ],
        "responsibilities": [
            "Design and implement backend systems", "Develop and maintain APIs",
            "Optimize database performance", "Mentor junior developers",
        ],
        "min_salary": Decimal("125000.00"),
        "max_salary": Decimal("185000.00"),
        "max_incumbents": 3,
    },
    {
        "key": "backend_dev",
        "unit": "backend_team",
        "level": "staff",
        "position_code": "POS011",
        "title": "Backend Developer",
        "job_description": "Develop and maintain backend services and APIs",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 2 years of backend development experience",
            "Proficiency in Python and database technologies",
            "Understanding of RESTful API design",
        ],
        "responsibilities": [
            "Implement business logic", "Develop REST APIs",
            "Write database queries", "Ensure code quality and testing",
        ],
        "min_salary": Decimal("85000.00"),
        "max_salary": Decimal("125000.00"),
        "max_incumbents": 5,
    },
    {
        "key": "qa_manager",
        "unit": "qa_department",
        "level": "manager",
        "position_code": "POS012",
        "title": "QA Manager",
        "job_description": "Lead quality assurance processes and team",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 5 years of QA experience",
            "Strong knowledge of testing methodologies",
            "Leadership and team management skills",
        ],
        "responsibilities": [
            "Define testing strategies", "Manage QA team",
            "Ensure product quality", "Implement QA processes",
        ],
        "min_salary": Decimal("100000.00"),
        "max_salary": Decimal("150000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "qa_engineer",
        "unit": "qa_department",
        "level": "staff",
        "position_code": "POS013",
        "title": "QA Engineer",
        "job_description": "Test software applications and ensure quality",
        "qualifications": [
            "Computer Science degree or equivalent experience",
            "Minimum 2 years of testing experience",
            "Knowledge of manual and automated testing",
            "Attention to detail and analytical skills",
        ],
        "responsibilities": [
            "Execute test plans", "Report and track bugs",
            "Perform functional and regression testing", "Collaborate with development teams",
        ],
        "min_salary": Decimal("70000.00"),
        "max_salary": Decimal("100000.00"),
        "max_incumbents": 4,
    },
    {
        "key": "hr_director",
        "unit": "hr_department",
        "level": "director",
        "position_code": "POS014",
        "title": "HR Director",
        "job_description": "Lead human resources strategy and operations",
        "qualifications": [
            "HR or Business degree",
            "Minimum 8 years of HR experience",
            "Strong knowledge of employment law",
            "Leadership and strategic thinking skills",
        ],
        "responsibilities": [
            "Develop HR strategies", "Lead HR team",
            "Ensure compliance with labor laws", "Drive employee engagement",
        ],
        "min_salary": Decimal("120000.00"),
        "max_salary": Decimal("180000.00"),
        "max_incumbents": 1,
    },
    {
        "key": "hr_specialist",
        "unit": "hr_department",
        "level": "staff",
        "position_code": "POS015",
        "title": "HR Specialist",
        "job_description": "Support HR operations and employee services",
        "qualifications": [
            "HR or Business degree",
            "Minimum 2 years of HR experience",
            "Knowledge of HR processes",
            "Strong communication and interpersonal skills",
        ],
        "responsibilities": [
            "Support recruitment processes", "Assist with employee onboarding",
            "Handle employee inquiries", "Maintain HR records",
        ],
        "min_salary": Decimal("60000.00"),
        "max_salary": Decimal("85000.00"),
        "max_incumbents": 3,
    },
]

# 멤버십 — user는 이메일로 참조 (Users are referenced by email)
ORGANIZATION_MEMBERSHIPS: list[dict] = [
    {"user": "john.smith@techcorp.com", "organization": "techcorp_holdings",
     "unit": "board_of_directors", "position": "ceo", "membership_type": "board_member",
     "start_date": date(2020, 1, 15), "end_date": None,
     "additional_roles": ["strategic_planning", "investor_relations"]},
    {"user": "jane.doe@techcorp.com", "organization": "techcorp_holdings",
     "unit": "board_of_directors", "position": "cfo", "membership_type": "board_member",
     "start_date": date(2020, 2, 1), "end_date": None,
     "additional_roles": ["financial_oversight", "risk_management"]},
    {"user": "mike.johnson@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "executive_office", "position": "managing_director", "membership_type": "employee",
     "start_date": date(2021, 3, 1), "end_date": None,
     "additional_roles": ["business_development", "client_relations"]},
    {"user": "sarah.wilson@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "executive_office", "position": "cto", "membership_type": "employee",
     "start_date": date(2021, 3, 15), "end_date": None,
     "additional_roles": ["innovation", "technical_strategy"]},
    {"user": "robert.taylor@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "engineering_division", "position": "vp_engineering", "membership_type": "employee",
     "start_date": date(2021, 4, 1), "end_date": None,
     "additional_roles": ["team_leadership", "process_improvement"]},
    {"user": "lisa.anderson@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "frontend_team", "position": "senior_frontend_dev", "membership_type": "employee",
     "start_date": date(2021, 5, 1), "end_date": None,
     "additional_roles": ["ui_architecture", "mentoring"]},
    {"user": "michael.chen@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "frontend_team", "position": "frontend_dev", "membership_type": "employee",
     "start_date": date(2022, 1, 15), "end_date": None,
     "additional_roles": ["component_development", "testing"]},
    {"user": "jennifer.martinez@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "backend_team", "position": "senior_backend_dev", "membership_type": "employee",
     "start_date": date(2021, 6, 1), "end_date": None,
     "additional_roles": ["system_architecture", "database_design"]},
    {"user": "alex.thompson@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "backend_team", "position": "backend_dev", "membership_type": "employee",
     "start_date": date(2022, 2, 1), "end_date": None,
     "additional_roles": ["api_development", "integration"]},
    {"user": "maria.rodriguez@techcorpsoftware.com", "organization": "techcorp_software",
     "unit": "qa_department", "position": "qa_manager", "membership_type": "employee",
     "start_date": date(2021, 7, 1), "end_date": None,
     "additional_roles": ["process_definition", "quality_metrics"]},
    {"user": "david.brown@techcorpdata.com", "organization": "techcorp_data",
     "unit": None, "position": None, "membership_type": "employee",
     "start_date": date(2021, 6, 15), "end_date": None,
     "additional_roles": ["managing_director", "ai_strategy"]},
    {"user": "emily.davis@techcorpdata.com", "organization": "techcorp_data",
     "unit": "ai_research_division", "position": None, "membership_type": "employee",
     "start_date": date(2021, 7, 1), "end_date": None,
     "additional_roles": ["head_of_ai", "research_leadership"]},
    {"user": "test@example.com", "organization": "techcorp_software",
     "unit": "engineering_division", "position": None, "membership_type": "consultant",
     "start_date": date(2024, 1, 1), "end_date": date(2024, 12, 31),
     "additional_roles": ["technical_advisory", "code_review"]},
]

