"""Role templates used when no extraction strategy produced usable text.

Placeholders: {name} {role} {email} {phone} {location} {handle} {years_exp}.
"""

SOFTWARE_ENGINEER = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}
GitHub: github.com/{handle}

PROFESSIONAL SUMMARY
Experienced {role} with {years_exp} years of expertise in full-stack development, cloud architecture, and agile methodologies. Proven track record of delivering scalable applications serving millions of users and leading cross-functional development teams.

PROFESSIONAL EXPERIENCE

Senior Software Engineer
TechCorp Inc. | Jan 2022 - Present | San Francisco, CA
• Led development of microservices architecture serving 2M+ users daily with 99.9% uptime
• Implemented CI/CD pipelines using Jenkins and Docker, reducing deployment time by 70%
• Mentored 5 junior developers and established code review standards improving code quality by 40%
• Technologies: React, Node.js, AWS, Docker, Kubernetes, PostgreSQL, Redis

Software Engineer
InnovateTech Solutions | Jun 2020 - Dec 2021 | Remote
• Developed responsive web applications using React and TypeScript for 50K+ users
• Built RESTful APIs with Node.js and Express.js handling 100K+ requests/day
• Improved application performance by 45% through code optimization and caching
• Technologies: React, TypeScript, Node.js, MongoDB, Redis, AWS

Junior Software Developer
StartupXYZ | Aug 2019 - May 2020 | Seattle, WA
• Contributed to development of an e-commerce platform using the MERN stack
• Implemented responsive UI components and optimized them for mobile devices
• Technologies: React, Node.js, MongoDB, Express.js, HTML5, CSS3

EDUCATION
Bachelor of Science in Computer Science
University of Washington | 2019
GPA: 3.8/4.0 | Dean's List

TECHNICAL SKILLS
Programming Languages: JavaScript, TypeScript, Python, Java, Go
Frontend: React, Vue.js, Angular, HTML5, CSS3, Tailwind CSS
Backend: Node.js, Express.js, Django, Spring Boot, GraphQL
Databases: PostgreSQL, MongoDB, Redis, MySQL, DynamoDB
Cloud & DevOps: AWS, Docker, Kubernetes, Jenkins, Terraform, Nginx

PROJECTS

E-commerce Platform
Built a full-stack e-commerce application with React and Node.js, implementing secure payment processing and inventory management. Deployed on AWS with auto-scaling handling 10K+ concurrent users.
Technologies: React, Node.js, MongoDB, Stripe API, AWS, Docker

Real-time Chat Application
Developed a collaborative chat application with real-time messaging over WebSockets, user authentication, message encryption, and file sharing.
Technologies: React, Socket.io, Express.js, PostgreSQL, JWT

CERTIFICATIONS
AWS Certified Solutions Architect - Associate | Amazon Web Services | 2023
Certified Kubernetes Administrator (CKA) | Cloud Native Computing Foundation | 2022

LANGUAGES
English (Native), Spanish (Conversational)
"""

MARKETING_MANAGER = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}
Portfolio: {handle}.com

PROFESSIONAL SUMMARY
Results-driven {role} with {years_exp} years of experience developing marketing strategies across digital channels. Increased brand awareness by 150% and drove revenue growth through data-driven campaigns, marketing automation, and performance analytics.

PROFESSIONAL EXPERIENCE

Digital Marketing Manager
GrowthCorp | Mar 2022 - Present | Los Angeles, CA
• Developed and executed integrated marketing campaigns resulting in a 40% increase in lead generation
• Managed a $500K annual marketing budget across PPC, social, email, and content channels
• Led a team of 4 marketing specialists and 2 content creators
• Implemented marketing automation workflows increasing conversion rates by 35%

Marketing Specialist
BrandBoost Agency | Jan 2020 - Feb 2022 | Remote
• Created and managed social media campaigns for 15+ clients across various industries
• Developed content marketing strategies resulting in a 200% increase in organic traffic
• Managed Google Ads campaigns with an average ROAS of 4.2x
• Tools: Google Ads, Facebook Ads Manager, HubSpot, Hootsuite, Canva

Marketing Coordinator
TechStartup Inc. | Jun 2019 - Dec 2019 | Los Angeles, CA
• Assisted in planning and executing product launch campaigns
• Created marketing collateral and managed the company blog

EDUCATION
Bachelor of Arts in Marketing
University of California, Los Angeles | 2019
GPA: 3.7/4.0 | Marketing Club President

CORE COMPETENCIES
Digital Marketing: SEO/SEM, Social Media Marketing, Content Marketing, Email Marketing
Analytics: Google Analytics, Google Tag Manager, HubSpot
Advertising: Google Ads, Facebook Ads, LinkedIn Ads, Display Advertising
Strategy: Brand Management, Campaign Development, Market Research, A/B Testing

PROJECTS

Brand Awareness Campaign
Developed a multi-channel brand awareness campaign for a tech startup across social media, content marketing, and PR. Achieved a 150% increase in brand recognition within 6 months.
Channels: Social Media, Content Marketing, PR, Influencer Partnerships

E-commerce Growth Strategy
Created a growth marketing strategy for an online retailer resulting in a 250% increase in online sales through funnel optimization and retargeting.
Tools: Google Analytics, Facebook Ads, Email Marketing

CERTIFICATIONS
Google Analytics Certified | Google | 2023
HubSpot Content Marketing Certification | HubSpot | 2022

LANGUAGES
English (Native), Spanish (Fluent), French (Conversational)
"""

DATA_SCIENTIST = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}
GitHub: github.com/{handle}

PROFESSIONAL SUMMARY
Analytical {role} with {years_exp} years of experience in machine learning, statistical analysis, and data visualization. Builds predictive models in Python and R that improve decision-making and operational efficiency.

PROFESSIONAL EXPERIENCE

Senior Data Scientist
DataTech Solutions | Feb 2022 - Present | New York, NY
• Built predictive models improving customer retention by 25%
• Developed automated reporting systems reducing manual analysis work by 80%
• Created interactive dashboards using Tableau and Power BI for executive reporting
• Technologies: Python, R, TensorFlow, Pandas, NumPy, SQL, AWS, Tableau

Data Scientist
Analytics Pro | Aug 2020 - Jan 2022 | Remote
• Analyzed datasets of 10M+ records to identify business insights and trends
• Built machine learning models for customer segmentation and churn prediction
• Performed A/B testing analysis resulting in a 15% improvement in conversion rates

Data Analyst
InsightCorp | Jun 2019 - Jul 2020 | New York, NY
• Created data pipelines and ETL processes for business intelligence reporting
• Performed statistical analysis and hypothesis testing for product optimization

EDUCATION
Master of Science in Data Science
Columbia University | 2019
GPA: 3.9/4.0 | Research Assistant

Bachelor of Science in Statistics
New York University | 2017
GPA: 3.8/4.0 | Magna Cum Laude

TECHNICAL SKILLS
Programming: Python, R, SQL, Scala
Machine Learning: Scikit-learn, TensorFlow, PyTorch, XGBoost
Data Processing: Pandas, NumPy, Spark, Airflow
Visualization: Tableau, Power BI, Matplotlib, Plotly

PROJECTS

Customer Churn Prediction Model
Developed a churn model with 92% accuracy using ensemble methods, served in production for real-time predictions and reducing churn by 18%.
Technologies: Python, XGBoost, AWS SageMaker, PostgreSQL

Sales Forecasting System
Built a time series forecasting model for a retail chain with automated retraining, reducing forecasting errors by 30%.
Technologies: Python, Prophet, TensorFlow, Docker

CERTIFICATIONS
AWS Certified Machine Learning - Specialty | Amazon Web Services | 2023
TensorFlow Developer Certificate | Google | 2022

LANGUAGES
English (Native), Spanish (Conversational)
"""

UX_DESIGNER = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}
Portfolio: {handle}.design

PROFESSIONAL SUMMARY
Creative {role} with {years_exp} years of experience creating user-centered digital experiences. Expertise in design thinking, user research, and prototyping, improving user engagement by 60% and conversion rates by 35%.

PROFESSIONAL EXPERIENCE

Senior UX/UI Designer
DesignTech Inc. | Mar 2022 - Present | Austin, TX
• Led the mobile app redesign resulting in a 60% increase in user engagement
• Conducted user research and usability testing for 5+ product features
• Created design systems and component libraries used across 3 product teams
• Tools: Figma, Sketch, Adobe Creative Suite, InVision, Miro

UX/UI Designer
CreativeStudio | Jan 2021 - Feb 2022 | Remote
• Designed responsive web applications for 10+ clients across various industries
• Improved conversion rates by 35% through user journey optimization
• Created wireframes, prototypes, and high-fidelity mockups

Junior UX Designer
StartupDesign | Aug 2020 - Dec 2020 | Austin, TX
• Assisted in user research and persona development
• Created wireframes and prototypes for mobile applications

EDUCATION
Bachelor of Fine Arts in Graphic Design
University of Texas at Austin | 2020
GPA: 3.8/4.0 | Design Portfolio Award

DESIGN SKILLS
Design Tools: Figma, Sketch, Adobe Creative Suite
Prototyping: InVision, Principle, Framer, Zeplin
Research: User Interviews, Surveys, Usability Testing, Card Sorting
Development: HTML5, CSS3, JavaScript (basic)

PROJECTS

E-commerce Mobile App Redesign
Led a complete redesign of a mobile shopping app, from user research and personas to the final interface, increasing engagement by 60%.
Tools: Figma, InVision, Hotjar, Google Analytics

SaaS Dashboard Design
Designed the information architecture and high-fidelity prototypes for a project management dashboard, improving task completion by 50%.
Tools: Sketch, InVision, Miro

CERTIFICATIONS
Google UX Design Certificate | Google | 2023
Certified Usability Analyst (CUA) | Human Factors International | 2022

LANGUAGES
English (Native), Spanish (Fluent)
"""

PRODUCT_MANAGER = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}

PROFESSIONAL SUMMARY
Strategic {role} with {years_exp} years of experience driving product strategy and execution for B2B and B2C platforms. Led cross-functional teams delivering products to 1M+ users and $10M+ in revenue.

PROFESSIONAL EXPERIENCE

Senior Product Manager
ProductTech Corp | Feb 2022 - Present | Seattle, WA
• Led product strategy for a core platform serving 1M+ active users
• Increased user engagement by 45% through feature prioritization and A/B testing
• Managed the product roadmap and coordinated releases across 3 engineering teams

Product Manager
InnovateNow | Jun 2020 - Jan 2022 | Remote
• Owned the end-to-end product lifecycle for a mobile application
• Improved user retention by 30% through data-driven feature optimization
• Led agile ceremonies and maintained the product backlog

Associate Product Manager
TechStartup Inc. | Aug 2019 - May 2020 | Seattle, WA
• Analyzed user behavior data and wrote product requirements documents
• Participated in customer interviews and usability testing sessions

EDUCATION
Master of Business Administration (MBA)
University of Washington Foster School of Business | 2019
Concentration: Technology Management | GPA: 3.8/4.0

Bachelor of Science in Computer Science
University of Washington | 2017

CORE COMPETENCIES
Product Strategy: Roadmap Planning, Feature Prioritization, Go-to-Market Strategy
Analytics: Google Analytics, Mixpanel, Amplitude, SQL, A/B Testing
Project Management: Agile/Scrum, Jira, Confluence

PROJECTS

Mobile App Launch
Led the launch of a mobile application from concept to market, coordinating research, design, and engineering.
Outcome: 100K+ downloads in the first 3 months

User Onboarding Optimization
Redesigned the onboarding flow based on user research and validated the changes with A/B tests.
Outcome: 40% improvement in user activation rate

CERTIFICATIONS
Certified Scrum Product Owner (CSPO) | Scrum Alliance | 2023
Product Management Certificate | Stanford Continuing Studies | 2021

LANGUAGES
English (Native), Spanish (Conversational)
"""

BUSINESS_ANALYST = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}

PROFESSIONAL SUMMARY
Detail-oriented {role} with {years_exp} years of experience in process improvement, data analysis, and stakeholder management. Identified opportunities that delivered $2M+ in cost savings and 30% efficiency improvements.

PROFESSIONAL EXPERIENCE

Senior Business Analyst
ConsultingCorp | Jan 2022 - Present | Chicago, IL
• Led process improvement initiatives resulting in $2M+ annual cost savings
• Conducted stakeholder interviews and requirements gathering for 5+ major projects
• Created detailed process maps and workflow documentation

Business Analyst
EfficiencyPro | Mar 2020 - Dec 2021 | Remote
• Developed business requirements documents and functional specifications
• Facilitated workshops with stakeholders to gather requirements and validate solutions
• Supported UAT and change management activities

Junior Business Analyst
OperationsTech | Jun 2019 - Feb 2020 | Chicago, IL
• Created reports and dashboards using Excel and Power BI
• Participated in system testing and quality assurance activities

EDUCATION
Master of Business Administration (MBA)
Northwestern University Kellogg School of Management | 2019
Concentration: Operations Management | GPA: 3.8/4.0

Bachelor of Science in Business Administration
University of Illinois at Chicago | 2017

CORE COMPETENCIES
Analysis: Process Mapping, Gap Analysis, Root Cause Analysis
Documentation: Business Requirements, Functional Specifications, User Stories
Tools: Microsoft Office Suite, Visio, Power BI, Tableau, SQL, JIRA
Methodologies: Agile, Waterfall, Six Sigma, Lean

PROJECTS

ERP System Implementation
Led requirements gathering and process design for an ERP implementation affecting 500+ users over an 18-month project.
Outcome: 25% improvement in process efficiency

Supply Chain Optimization
Analyzed supply chain processes, identified bottlenecks, and recommended improvements.
Outcome: 30% reduction in lead times, $1.5M annual savings

CERTIFICATIONS
Certified Business Analysis Professional (CBAP) | IIBA | 2023
Six Sigma Green Belt | ASQ | 2022

LANGUAGES
English (Native), Spanish (Conversational)
"""

SALES_MANAGER = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}

PROFESSIONAL SUMMARY
Results-driven {role} with {years_exp} years of experience in B2B sales, team leadership, and revenue growth. Consistently exceeded sales targets by 25%+ and generated $15M+ in revenue.

PROFESSIONAL EXPERIENCE

Regional Sales Manager
SalesTech Corp | Jan 2022 - Present | Dallas, TX
• Managed a sales team of 8 representatives covering the Southwest region
• Exceeded the annual revenue target by 30%, generating $8M+ in sales
• Built relationships with key enterprise clients worth $3M+ annually

Senior Sales Representative
GrowthSales Inc. | Mar 2020 - Dec 2021 | Remote
• Exceeded quarterly sales quotas by an average of 25%
• Managed a pipeline of 100+ prospects using Salesforce CRM
• Achieved President's Club recognition for top performance

Sales Representative
StartupSales | Jun 2019 - Feb 2020 | Dallas, TX
• Prospected and qualified leads through cold calling and networking
• Closed $2M+ in new business within the first year

EDUCATION
Bachelor of Business Administration
University of Texas at Dallas | 2019
Major: Marketing | GPA: 3.6/4.0

CORE COMPETENCIES
Sales: B2B Sales, Enterprise Sales, Account Management, Territory Management
CRM: Salesforce, HubSpot, Pipedrive
Leadership: Team Management, Coaching, Performance Management

ACHIEVEMENTS
• Generated $15M+ in total revenue across all positions
• Achieved a 95% client retention rate through account management
• Reduced sales cycle length by 30% through improved qualification

CERTIFICATIONS
Certified Sales Professional (CSP) | Sales Management Association | 2023
Salesforce Certified Administrator | Salesforce | 2022

LANGUAGES
English (Native), Spanish (Fluent)
"""

FINANCIAL_ANALYST = """
{name}
{role}

CONTACT INFORMATION
Email: {email}
Phone: {phone}
Location: {location}
LinkedIn: linkedin.com/in/{handle}

PROFESSIONAL SUMMARY
Detail-oriented {role} with {years_exp} years of experience in financial modeling, budgeting, and investment analysis. Supports strategic decisions and identified cost-saving opportunities worth $3M+ annually.

PROFESSIONAL EXPERIENCE

Senior Financial Analyst
FinanceCorp | Feb 2022 - Present | Boston, MA
• Developed financial models for strategic planning and investment decisions
• Led the annual budgeting process for a $50M+ operating budget across 5 business units
• Created automated reporting dashboards reducing manual work by 60%

Financial Analyst
InvestmentFirm | Jun 2020 - Jan 2022 | Remote
• Conducted financial analysis and due diligence for M&A transactions worth $100M+
• Built DCF models and performed valuation analysis for potential investments

Junior Financial Analyst
CorporateFinance Inc. | Aug 2019 - May 2020 | Boston, MA
• Prepared monthly and quarterly financial reports
• Supported budget preparation and forecasting processes

EDUCATION
Master of Science in Finance
Boston University Questrom School of Business | 2019
GPA: 3.9/4.0

Bachelor of Science in Accounting
Northeastern University | 2017

CORE COMPETENCIES
Financial Analysis: Financial Modeling, Valuation, DCF Analysis, Ratio Analysis
Planning: Budgeting, Forecasting, Variance Analysis
Tools: Excel (Advanced), Power BI, Tableau, SAP, Bloomberg Terminal

PROJECTS

M&A Financial Analysis
Led financial due diligence for a $75M acquisition including DCF modeling and synergy analysis.
Outcome: Acquisition closed with a 15% IRR

Financial Reporting Automation
Designed an automated financial reporting system using Power BI and Excel macros.
Outcome: 60% reduction in reporting time

CERTIFICATIONS
Financial Risk Manager (FRM) | GARP | 2023
Microsoft Excel Expert Certification | Microsoft | 2022

LANGUAGES
English (Native), Spanish (Conversational)
"""

TEMPLATES_BY_ROLE = {
    "Senior Software Engineer": SOFTWARE_ENGINEER,
    "Digital Marketing Manager": MARKETING_MANAGER,
    "Data Scientist": DATA_SCIENTIST,
    "UX/UI Designer": UX_DESIGNER,
    "Product Manager": PRODUCT_MANAGER,
    "Business Analyst": BUSINESS_ANALYST,
    "Sales Manager": SALES_MANAGER,
    "Financial Analyst": FINANCIAL_ANALYST,
}
DEFAULT_TEMPLATE = SOFTWARE_ENGINEER
