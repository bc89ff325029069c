# careerguide/services/roadmap_catalog.py - Static catalog of supported career roadmaps
#
# Loaded once at import time and never mutated. Role resolution and enrichment
# live in role_resolver.py.

from typing import Dict, List, Tuple

from careerguide.models.roadmap import FixedRoleRoadmap

UNSUPPORTED_SKILL_MESSAGE = (
    "This skill roadmap is currently not available. "
    "Please choose one of the top industry-demand skills."
)

COMMON_PLATFORMS = ["LinkedIn", "Indeed", "Naukri", "Wellfound", "Internshala"]

COMMON_RESUME_TIPS = [
    "Use measurable impact bullets for every project and internship.",
    "Tailor resume keywords to the role description.",
    "Highlight tools, certifications, and portfolio links in the top section.",
]

COMMON_SOFT_SKILLS = [
    "Communication and stakeholder updates",
    "Time management and weekly execution planning",
    "Problem-solving and structured thinking",
    "Collaboration in cross-functional teams",
    "Documentation and presentation clarity",
    "Feedback handling and iteration mindset",
]

COMMON_INTERNSHIP_STRATEGY = [
    "Start applying after 3 strong projects/case studies",
    "Target startups for faster ownership and learning",
    "Customize each application with relevant project links",
    "Network with hiring managers and alumni on LinkedIn",
    "Track applications weekly and follow up professionally",
]

COMMON_FREELANCING_STRATEGY = [
    "Create service packages based on your strongest projects",
    "Build profile credibility with detailed portfolio proof",
    "Start with small fixed-scope gigs and collect reviews",
    "Use proposals that clearly define deliverables and timelines",
    "Retain clients via maintenance/support offerings",
]


def _gaps(*pairs: Tuple[str, int]) -> List[Dict[str, object]]:
    return [{"skill": skill, "gap": gap} for skill, gap in pairs]


_CATALOG_DATA = [
    {
        "canonical_role": "Frontend Developer",
        "aliases": ["frontend developer", "frontend", "front end developer", "ui developer"],
        "strength_profile": "You are suited for building user-focused, high-performance web interfaces.",
        "career_persona": "Interface-Focused Builder",
        "roadmap": {
            "beginner": ["Learn HTML, CSS, JavaScript fundamentals", "Build 3 responsive pages"],
            "intermediate": ["Master React + TypeScript", "Build dashboard and auth UI"],
            "advanced": ["Optimize performance and testing", "Contribute to production frontend systems"],
        },
        "tools_to_learn": ["React", "TypeScript", "Next.js", "Tailwind CSS", "Jest"],
        "certifications": ["Meta Front-End Developer", "freeCodeCamp Front End Libraries"],
        "real_world_projects": ["SaaS admin dashboard", "Real-time analytics UI"],
        "portfolio_requirements": ["3 production-quality projects", "Live deploy links"],
        "interview_preparation_topics": ["JavaScript closures", "React rendering lifecycle"],
        "estimated_timeline": "6-10 months",
        "salary_range": "USD 60k-140k",
        "skill_gap_preview": _gaps(
            ("JavaScript Depth", 55), ("Component Architecture", 60), ("Testing", 62), ("Performance", 58)
        ),
    },
    {
        "canonical_role": "Backend Developer",
        "aliases": ["backend developer", "backend", "back end developer", "api developer"],
        "strength_profile": "You are aligned with scalable systems, APIs, and data-focused engineering.",
        "career_persona": "Systems Reliability Builder",
        "roadmap": {
            "beginner": ["Learn one backend language and core data structures", "Build secure CRUD APIs"],
            "intermediate": ["Work with relational and NoSQL databases", "Add caching and async jobs"],
            "advanced": ["Design scalable services", "Own production deployment and incident response"],
        },
        "tools_to_learn": ["Node.js", "Express", "PostgreSQL", "MongoDB", "Redis"],
        "certifications": ["AWS Developer Associate", "MongoDB Developer Path"],
        "real_world_projects": ["Booking API with RBAC", "Payment service with webhooks"],
        "portfolio_requirements": ["API documentation", "Architecture diagrams"],
        "interview_preparation_topics": ["Database indexing", "Distributed system basics"],
        "estimated_timeline": "7-12 months",
        "salary_range": "USD 70k-150k",
        "skill_gap_preview": _gaps(
            ("Database Design", 58), ("Scalability", 66), ("Security", 60), ("Observability", 63)
        ),
    },
    {
        "canonical_role": "Full Stack Developer",
        "aliases": ["full stack developer", "fullstack developer", "full stack", "web developer"],
        "strength_profile": "You can own end-to-end product delivery across frontend and backend layers.",
        "career_persona": "Product-Oriented Generalist",
        "roadmap": {
            "beginner": ["Build frontend and backend fundamentals", "Develop full-stack CRUD apps"],
            "intermediate": ["Implement auth, uploads, and payments", "Add testing and deployment pipelines"],
            "advanced": ["Design scalable architecture", "Lead feature delivery from design to deployment"],
        },
        "tools_to_learn": ["React", "Next.js", "Node.js", "PostgreSQL", "Docker"],
        "certifications": ["Meta Full Stack Certificate", "AWS Cloud Practitioner"],
        "real_world_projects": ["Subscription SaaS", "Marketplace platform"],
        "portfolio_requirements": ["3 deployed full-stack apps", "Clear architecture docs"],
        "interview_preparation_topics": ["System design tradeoffs", "API versioning"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 75k-160k",
        "skill_gap_preview": _gaps(
            ("Frontend Depth", 56), ("Backend Robustness", 60), ("Deployment", 62), ("System Design", 64)
        ),
    },
    {
        "canonical_role": "UI/UX Designer",
        "aliases": [
            "ui ux designer",
            "ui/ux designer",
            "ux designer",
            "ui designer",
            "designer",
            "product designer",
            "product design",
            "graphic design",
            "figma",
            "adobe xd",
            "ui",
            "ux",
        ],
        "strength_profile": "You are strong in user empathy, interface clarity, and design communication.",
        "career_persona": "Human-Centered Designer",
        "roadmap": {
            "beginner": [
                "Learn design fundamentals: typography, color theory, and layout principles",
                "Learn Figma basics, wireframing, and UX fundamentals",
                "Create 3 small UI projects",
            ],
            "intermediate": [
                "Use advanced Figma workflows and interactive prototyping",
                "Run user research and usability testing sessions",
                "Build design systems and write case studies",
            ],
            "advanced": [
                "Apply interaction design, micro animations, and accessibility standards",
                "Complete real client project or internship/freelance engagement",
                "Build product thinking and interview-ready portfolio walkthroughs",
            ],
        },
        "tools_to_learn": ["Figma", "Canva", "Adobe XD", "Miro", "Notion"],
        "certifications": ["Google UX Design Certificate", "NN/g UX Certification"],
        "real_world_projects": [
            "Landing page redesign",
            "Mobile app wireframe",
            "Simple dashboard UI",
            "Complete SaaS redesign",
            "Mobile app UI system",
            "Portfolio case study",
        ],
        "portfolio_requirements": [
            "3-5 strong case studies",
            "Clear problem statement for each project",
            "Research process explanation",
            "Before/after comparison",
        ],
        "interview_preparation_topics": [
            "Design thinking process",
            "UX case walkthrough",
            "Tool proficiency discussion",
            "Live design challenge",
        ],
        "estimated_timeline": "6-12 months",
        "salary_range": "USD 55k-135k",
        "job_ready_checklist": [
            "Strong portfolio with case studies",
            "Resume tailored for design roles",
            "LinkedIn profile optimized with portfolio links",
            "Applications submitted on LinkedIn, Wellfound, Internshala, and Indeed",
        ],
        "skill_gap_preview": _gaps(
            ("UX Research", 55), ("Visual Systems", 52), ("Case Study Depth", 60), ("Design Communication", 57)
        ),
    },
    {
        "canonical_role": "Data Scientist",
        "aliases": ["data scientist", "data science"],
        "strength_profile": "You are suited for extracting insight from data and communicating business impact.",
        "career_persona": "Insight-Driven Analyst",
        "roadmap": {
            "beginner": ["Learn Python, statistics, and SQL", "Build exploratory analysis projects"],
            "intermediate": ["Use ML for regression and classification", "Build end-to-end dashboard projects"],
            "advanced": ["Handle large-scale pipelines and monitoring", "Deliver business-ready recommendations"],
        },
        "tools_to_learn": ["Python", "Pandas", "SQL", "scikit-learn", "Tableau"],
        "certifications": ["IBM Data Science Professional Certificate", "Google Advanced Data Analytics"],
        "real_world_projects": ["Customer churn prediction", "Sales forecasting pipeline"],
        "portfolio_requirements": ["Business problem framing", "Clean EDA + modeling notebooks"],
        "interview_preparation_topics": ["Bias-variance", "SQL case studies"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 80k-170k",
        "skill_gap_preview": _gaps(
            ("Statistics", 58), ("Feature Engineering", 61), ("Model Evaluation", 59), ("Business Communication", 55)
        ),
    },
    {
        "canonical_role": "Machine Learning Engineer",
        "aliases": ["machine learning engineer", "ml engineer", "machine learning"],
        "strength_profile": "You align with production ML systems and model lifecycle engineering.",
        "career_persona": "Applied ML Engineer",
        "roadmap": {
            "beginner": ["Build strong Python, math, and ML fundamentals", "Train baseline models on datasets"],
            "intermediate": ["Learn MLOps and deployment", "Build model APIs with monitoring"],
            "advanced": ["Optimize model serving at scale", "Design robust ML platforms"],
        },
        "tools_to_learn": ["PyTorch", "TensorFlow", "MLflow", "FastAPI", "Docker"],
        "certifications": ["TensorFlow Developer Certificate", "AWS ML Specialty"],
        "real_world_projects": ["Recommendation engine", "Fraud detection model service"],
        "portfolio_requirements": ["Training and serving code", "Model metrics and tradeoffs"],
        "interview_preparation_topics": ["Loss functions", "System design for ML"],
        "estimated_timeline": "10-16 months",
        "salary_range": "USD 95k-190k",
        "skill_gap_preview": _gaps(
            ("Math Foundations", 62), ("Model Serving", 66), ("MLOps", 68), ("Experimentation", 57)
        ),
    },
    {
        "canonical_role": "AI Engineer",
        "aliases": ["ai engineer", "artificial intelligence engineer", "genai engineer", "llm engineer"],
        "strength_profile": "You are positioned for building intelligent applications with modern AI stacks.",
        "career_persona": "AI Product Engineer",
        "roadmap": {
            "beginner": ["Learn Python and AI/ML concepts", "Build simple AI assistants"],
            "intermediate": ["Implement RAG pipelines and evaluation", "Create secure AI workflows with guardrails"],
            "advanced": ["Optimize cost, latency, and quality", "Design domain-specific AI products"],
        },
        "tools_to_learn": ["Python", "LangChain", "Vector DB", "FastAPI", "Docker"],
        "certifications": ["Google Generative AI", "Azure AI Engineer Associate"],
        "real_world_projects": ["RAG knowledge assistant", "AI support copilot"],
        "portfolio_requirements": ["Prompt + retrieval strategy docs", "Evaluation results"],
        "interview_preparation_topics": ["Prompt engineering", "RAG architecture"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 95k-200k",
        "skill_gap_preview": _gaps(
            ("Prompt Design", 52), ("RAG Quality", 64), ("Productionization", 67), ("Evaluation", 61)
        ),
    },
    {
        "canonical_role": "DevOps Engineer",
        "aliases": ["devops engineer", "devops", "site reliability engineer", "sre"],
        "strength_profile": "You fit reliability, automation, and delivery-focused engineering roles.",
        "career_persona": "Automation and Reliability Engineer",
        "roadmap": {
            "beginner": ["Learn Linux, networking, and scripting basics", "Containerize apps with Docker"],
            "intermediate": ["Build CI/CD pipelines and IaC templates", "Deploy to cloud with monitoring"],
            "advanced": ["Design scalable deployments", "Lead reliability and platform optimization"],
        },
        "tools_to_learn": ["Docker", "Kubernetes", "Terraform", "GitHub Actions", "Prometheus"],
        "certifications": ["AWS SysOps Administrator", "CKA Kubernetes"],
        "real_world_projects": ["Multi-stage CI/CD pipeline", "K8s deployment platform"],
        "portfolio_requirements": ["Pipeline YAML", "Infra diagrams"],
        "interview_preparation_topics": ["Kubernetes internals", "Incident management"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 85k-175k",
        "skill_gap_preview": _gaps(
            ("Cloud Operations", 61), ("IaC", 64), ("Kubernetes", 68), ("Observability", 60)
        ),
    },
    {
        "canonical_role": "Cloud Engineer",
        "aliases": ["cloud engineer", "cloud developer", "aws engineer", "azure engineer", "gcp engineer"],
        "strength_profile": "You are aligned to architecting and operating cloud-native systems.",
        "career_persona": "Cloud Infrastructure Specialist",
        "roadmap": {
            "beginner": ["Learn cloud core services and pricing basics", "Deploy simple apps on cloud platforms"],
            "intermediate": ["Implement IAM, networking, and monitoring", "Use infrastructure as code"],
            "advanced": ["Design secure production architectures", "Lead cloud migration and modernization"],
        },
        "tools_to_learn": ["AWS", "Azure", "GCP", "Terraform", "CloudWatch"],
        "certifications": ["AWS Solutions Architect Associate", "Azure Administrator Associate"],
        "real_world_projects": ["Cloud-hosted web app stack", "Serverless event pipeline"],
        "portfolio_requirements": ["Architecture diagrams", "IaC repository"],
        "interview_preparation_topics": ["VPC design", "HA and DR strategies"],
        "estimated_timeline": "7-12 months",
        "salary_range": "USD 85k-170k",
        "skill_gap_preview": _gaps(
            ("Networking", 58), ("Security", 63), ("Architecture", 64), ("Cost Optimization", 57)
        ),
    },
    {
        "canonical_role": "Cybersecurity Analyst",
        "aliases": ["cybersecurity analyst", "cyber security analyst", "security analyst", "soc analyst"],
        "strength_profile": "You are suited for threat detection, defense strategy, and secure operations.",
        "career_persona": "Threat Defense Analyst",
        "roadmap": {
            "beginner": ["Learn networking, OS, and security basics", "Practice incident response workflows"],
            "intermediate": ["Use SIEM tools and log analysis", "Perform vulnerability assessment and remediation"],
            "advanced": ["Lead threat hunting playbooks", "Implement security governance controls"],
        },
        "tools_to_learn": ["Wireshark", "Splunk", "Nmap", "Burp Suite", "Kali Linux"],
        "certifications": ["CompTIA Security+", "CEH"],
        "real_world_projects": ["SOC alert triage dashboard", "Incident response simulation"],
        "portfolio_requirements": ["Threat analysis reports", "Mitigation case studies"],
        "interview_preparation_topics": ["OWASP Top 10", "Incident response lifecycle"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 75k-155k",
        "skill_gap_preview": _gaps(
            ("Threat Detection", 60), ("Incident Response", 62), ("Vulnerability Mgmt", 58), ("Security Governance", 65)
        ),
    },
    {
        "canonical_role": "Mobile App Developer",
        "aliases": [
            "mobile app developer",
            "mobile developer",
            "app developer",
            "flutter developer",
            "react native developer",
        ],
        "strength_profile": "You are aligned with creating performant, user-centric mobile experiences.",
        "career_persona": "Mobile Product Builder",
        "roadmap": {
            "beginner": ["Learn mobile UI fundamentals and app architecture", "Build simple apps with state and navigation"],
            "intermediate": ["Integrate APIs, auth, and notifications", "Ship apps to testing channels"],
            "advanced": ["Build scalable architecture and analytics", "Prepare for production release cycles"],
        },
        "tools_to_learn": ["Flutter", "React Native", "Firebase", "Android Studio", "Xcode"],
        "certifications": ["Google Associate Android Developer", "Meta React Native"],
        "real_world_projects": ["Habit tracker app", "E-commerce mobile app"],
        "portfolio_requirements": ["App build links", "Architecture notes"],
        "interview_preparation_topics": ["Mobile lifecycle", "State management"],
        "estimated_timeline": "7-12 months",
        "salary_range": "USD 70k-150k",
        "skill_gap_preview": _gaps(
            ("App Architecture", 59), ("API Integration", 55), ("Performance", 61), ("Release Process", 58)
        ),
    },
    {
        "canonical_role": "Android Developer",
        "aliases": ["android developer", "android", "kotlin developer"],
        "strength_profile": "You are suited for native Android engineering and platform optimization.",
        "career_persona": "Native Android Engineer",
        "roadmap": {
            "beginner": ["Learn Kotlin and Android fundamentals", "Build UI and local data workflows"],
            "intermediate": ["Work with APIs and clean architecture", "Add testing and background jobs"],
            "advanced": ["Optimize app performance and startup time", "Lead production releases and monitoring"],
        },
        "tools_to_learn": ["Kotlin", "Jetpack Compose", "Room", "Retrofit", "Firebase"],
        "certifications": ["Google Associate Android Developer"],
        "real_world_projects": ["Finance tracker app", "Offline-first notes app"],
        "portfolio_requirements": ["Playable APK links", "Test coverage"],
        "interview_preparation_topics": ["Android lifecycle", "Coroutines"],
        "estimated_timeline": "7-12 months",
        "salary_range": "USD 70k-145k",
        "skill_gap_preview": _gaps(
            ("Kotlin Proficiency", 54), ("App Architecture", 61), ("Testing", 63), ("Performance Tuning", 60)
        ),
    },
    {
        "canonical_role": "iOS Developer",
        "aliases": ["ios developer", "ios", "swift developer", "iphone developer"],
        "strength_profile": "You are aligned to building premium native iOS experiences.",
        "career_persona": "Native iOS Engineer",
        "roadmap": {
            "beginner": ["Learn Swift and SwiftUI fundamentals", "Build stateful views and networking basics"],
            "intermediate": ["Integrate APIs, auth, and notifications", "Implement architecture patterns and tests"],
            "advanced": ["Optimize memory and app performance", "Lead release quality and analytics workflows"],
        },
        "tools_to_learn": ["Swift", "SwiftUI", "Xcode", "Combine", "Core Data"],
        "certifications": ["Apple App Development with Swift"],
        "real_world_projects": ["Task manager app", "Subscription app"],
        "portfolio_requirements": ["TestFlight/demo videos", "Architecture notes"],
        "interview_preparation_topics": ["Swift memory management", "Concurrency"],
        "estimated_timeline": "7-12 months",
        "salary_range": "USD 75k-155k",
        "skill_gap_preview": _gaps(
            ("Swift Proficiency", 56), ("Architecture", 60), ("Testing", 61), ("Release Management", 57)
        ),
    },
    {
        "canonical_role": "Graphic Designer",
        "aliases": ["graphic designer", "visual designer", "branding designer"],
        "strength_profile": "You are strong in visual storytelling, brand identity, and creative execution.",
        "career_persona": "Visual Communication Designer",
        "roadmap": {
            "beginner": ["Learn design principles and composition", "Practice typography, color, and hierarchy"],
            "intermediate": ["Develop brand systems and campaign assets", "Work with client briefs and iterations"],
            "advanced": ["Build niche expertise and campaign leadership", "Deliver portfolio with measurable outcomes"],
        },
        "tools_to_learn": ["Photoshop", "Illustrator", "InDesign", "Figma", "Canva"],
        "certifications": ["Adobe Certified Professional"],
        "real_world_projects": ["Brand identity package", "Product packaging design"],
        "portfolio_requirements": ["Brand case studies", "Print + digital samples"],
        "interview_preparation_topics": ["Design rationale", "Brand consistency"],
        "estimated_timeline": "6-10 months",
        "salary_range": "USD 45k-110k",
        "skill_gap_preview": _gaps(
            ("Typography", 50), ("Brand Systems", 58), ("Creative Direction", 62), ("Client Communication", 55)
        ),
    },
    {
        "canonical_role": "Digital Marketing Specialist",
        "aliases": [
            "digital marketing specialist",
            "digital marketer",
            "seo specialist",
            "performance marketer",
            "marketing specialist",
        ],
        "strength_profile": "You are aligned to growth-focused campaigns, analytics, and conversion strategy.",
        "career_persona": "Growth Marketing Specialist",
        "roadmap": {
            "beginner": ["Learn SEO, SEM, content, and social basics", "Set up analytics tracking"],
            "intermediate": ["Master paid ads and conversion funnels", "Build reporting and optimization loops"],
            "advanced": ["Lead multi-channel growth strategy", "Scale campaigns with experimentation"],
        },
        "tools_to_learn": ["Google Analytics", "Google Ads", "Meta Ads Manager", "Ahrefs", "HubSpot"],
        "certifications": ["Google Ads Certification", "HubSpot Digital Marketing"],
        "real_world_projects": ["SEO audit + content plan", "Paid campaign optimization"],
        "portfolio_requirements": ["Campaign KPI snapshots", "Channel strategy breakdown"],
        "interview_preparation_topics": ["Attribution", "Funnel analytics"],
        "estimated_timeline": "5-9 months",
        "salary_range": "USD 50k-120k",
        "skill_gap_preview": _gaps(
            ("SEO Strategy", 56), ("Paid Ads", 60), ("Analytics", 58), ("CRO", 63)
        ),
    },
    {
        "canonical_role": "Product Manager",
        "aliases": ["product manager", "pm", "associate product manager", "apm"],
        "strength_profile": "You are suited for cross-functional leadership and product decision-making.",
        "career_persona": "Product Strategy Leader",
        "roadmap": {
            "beginner": ["Learn product lifecycle and prioritization", "Practice writing PRDs and user stories"],
            "intermediate": ["Run discovery interviews and roadmap planning", "Track metrics and iterate"],
            "advanced": ["Lead product strategy and stakeholder alignment", "Drive high-impact launches"],
        },
        "tools_to_learn": ["Jira", "Notion", "Figma", "Mixpanel", "SQL"],
        "certifications": ["Product School PM Certificate", "Google Project Management"],
        "real_world_projects": ["PRD for feature launch", "Product teardown strategy proposal"],
        "portfolio_requirements": ["Case studies on decisions", "Outcome-focused metrics"],
        "interview_preparation_topics": ["Product sense", "Execution tradeoffs"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 85k-190k",
        "skill_gap_preview": _gaps(
            ("Product Discovery", 59), ("Prioritization", 56), ("Stakeholder Management", 62), ("Metrics Ownership", 60)
        ),
    },
    {
        "canonical_role": "Business Analyst",
        "aliases": ["business analyst", "ba", "data business analyst"],
        "strength_profile": "You are aligned to translating business needs into data-driven execution.",
        "career_persona": "Business Insight Translator",
        "roadmap": {
            "beginner": ["Learn requirement documentation and process mapping", "Build SQL and spreadsheet analysis skills"],
            "intermediate": ["Perform stakeholder interviews and gap analysis", "Build dashboards and business reports"],
            "advanced": ["Lead cross-team requirement planning", "Drive process optimization initiatives"],
        },
        "tools_to_learn": ["Excel", "SQL", "Power BI", "Tableau", "Jira"],
        "certifications": ["ECBA", "IIBA CBAP (later stage)"],
        "real_world_projects": ["Business process map", "Executive KPI dashboard"],
        "portfolio_requirements": ["BRD/FRD samples", "Dashboard screenshots"],
        "interview_preparation_topics": ["Requirement elicitation", "Stakeholder communication"],
        "estimated_timeline": "6-11 months",
        "salary_range": "USD 60k-130k",
        "skill_gap_preview": _gaps(
            ("Requirement Analysis", 54), ("Data Reporting", 57), ("Stakeholder Handling", 60), ("Process Optimization", 62)
        ),
    },
    {
        "canonical_role": "Software Tester / QA Engineer",
        "aliases": ["software tester", "qa engineer", "quality assurance engineer", "tester", "sdet"],
        "strength_profile": "You fit quality-first engineering with strong validation and reliability mindset.",
        "career_persona": "Quality Automation Specialist",
        "roadmap": {
            "beginner": ["Learn testing fundamentals and bug lifecycle", "Write test cases and perform manual testing"],
            "intermediate": ["Automate UI/API tests", "Integrate testing into CI pipelines"],
            "advanced": ["Design quality strategy and test architecture", "Own quality metrics and release confidence"],
        },
        "tools_to_learn": ["Selenium", "Cypress", "Postman", "JMeter", "TestRail"],
        "certifications": ["ISTQB Foundation Level"],
        "real_world_projects": ["Automation suite", "API testing framework"],
        "portfolio_requirements": ["Test plans and bug reports", "Automation repositories"],
        "interview_preparation_topics": ["Test design techniques", "Defect triage"],
        "estimated_timeline": "6-10 months",
        "salary_range": "USD 55k-125k",
        "skill_gap_preview": _gaps(
            ("Test Design", 52), ("Automation", 61), ("API Testing", 57), ("Quality Metrics", 60)
        ),
    },
    {
        "canonical_role": "Blockchain Developer",
        "aliases": ["blockchain developer", "web3 developer", "smart contract developer", "solidity developer"],
        "strength_profile": "You are aligned with decentralized systems and secure smart contract engineering.",
        "career_persona": "Web3 Protocol Builder",
        "roadmap": {
            "beginner": ["Learn blockchain fundamentals and cryptography basics", "Build simple Solidity contracts"],
            "intermediate": ["Develop and test dApps with wallets", "Audit gas usage and vulnerabilities"],
            "advanced": ["Design protocol mechanics", "Implement security-first contract architecture"],
        },
        "tools_to_learn": ["Solidity", "Hardhat", "Ethers.js", "Remix", "Foundry"],
        "certifications": ["Certified Blockchain Developer"],
        "real_world_projects": ["ERC-20 token + dashboard", "DAO voting contract"],
        "portfolio_requirements": ["Verified contract links", "Security notes"],
        "interview_preparation_topics": ["Smart contract security", "Web3 architecture"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 80k-180k",
        "skill_gap_preview": _gaps(
            ("Solidity", 60), ("Smart Contract Security", 68), ("dApp Integration", 59), ("Protocol Design", 66)
        ),
    },
    {
        "canonical_role": "Game Developer",
        "aliases": ["game developer", "game dev", "unity developer", "unreal developer"],
        "strength_profile": "You are suited for interactive systems, gameplay mechanics, and creative engineering.",
        "career_persona": "Interactive Experience Engineer",
        "roadmap": {
            "beginner": ["Learn programming and game design fundamentals", "Build 2D mini games"],
            "intermediate": ["Use engines for 3D gameplay and level design", "Publish playable prototypes"],
            "advanced": ["Optimize rendering and performance", "Ship portfolio-ready games"],
        },
        "tools_to_learn": ["Unity", "Unreal Engine", "C#", "Blender", "Git LFS"],
        "certifications": ["Unity Certified Associate"],
        "real_world_projects": ["2D platformer", "3D action prototype"],
        "portfolio_requirements": ["Playable builds/videos", "Game design documents"],
        "interview_preparation_topics": ["Game loops", "Engine architecture"],
        "estimated_timeline": "8-14 months",
        "salary_range": "USD 60k-145k",
        "skill_gap_preview": _gaps(
            ("Engine Proficiency", 58), ("Gameplay Systems", 61), ("Optimization", 64), ("Asset Integration", 55)
        ),
    },
]

# First matching pass of role resolution. Order matters: an earlier entry wins
# when several keywords hit the same text.
KEYWORD_ROLE_MAP: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("UI/UX Designer", ("designer", "ui", "ux", "ui ux", "product design", "graphic design", "figma", "adobe xd")),
    ("Frontend Developer", ("frontend", "front end", "react", "html", "css", "javascript", "js")),
    ("Backend Developer", ("backend", "back end", "node", "express", "api", "server", "mongodb", "postgres")),
    ("Full Stack Developer", ("full stack", "fullstack", "mern", "mean")),
    ("Data Scientist", ("data science", "data scientist", "analytics", "pandas", "sql")),
    ("Machine Learning Engineer", ("machine learning", "ml", "deep learning", "model training")),
    ("AI Engineer", ("ai engineer", "artificial intelligence", "genai", "llm", "prompt engineering", "rag")),
    ("Cybersecurity Analyst", ("cyber", "security", "ethical hacking", "soc", "pentest")),
    ("Cloud Engineer", ("cloud", "aws", "azure", "gcp", "terraform")),
    ("DevOps Engineer", ("devops", "kubernetes", "ci cd", "sre", "docker")),
    ("Mobile App Developer", ("mobile app", "app developer", "flutter", "react native")),
    ("Android Developer", ("android", "kotlin", "jetpack")),
    ("iOS Developer", ("ios", "swift", "xcode")),
    ("Graphic Designer", ("branding", "poster design", "illustrator", "photoshop")),
    ("Digital Marketing Specialist", ("digital marketing", "seo", "sem", "google ads", "performance marketing")),
    ("Product Manager", ("product manager", "pm", "roadmap planning", "product strategy")),
    ("Business Analyst", ("business analyst", "ba", "requirement analysis", "brd", "frd")),
    ("Software Tester / QA Engineer", ("qa", "software tester", "sdet", "testing", "automation testing")),
    ("Blockchain Developer", ("blockchain", "web3", "solidity", "smart contract")),
    ("Game Developer", ("game developer", "unity", "unreal", "game dev")),
)


def _build_catalog() -> Tuple[FixedRoleRoadmap, ...]:
    entries = []
    for data in _CATALOG_DATA:
        entry = dict(data)
        entry.setdefault("job_platforms_to_apply", list(COMMON_PLATFORMS))
        entry.setdefault("resume_tips", list(COMMON_RESUME_TIPS))
        entries.append(FixedRoleRoadmap.model_validate(entry))
    return tuple(entries)


FIXED_ROADMAPS: Tuple[FixedRoleRoadmap, ...] = _build_catalog()

ROADMAPS_BY_ROLE: Dict[str, FixedRoleRoadmap] = {
    entry.canonical_role: entry for entry in FIXED_ROADMAPS
}
