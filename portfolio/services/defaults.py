"""
최초 부팅 시드 데이터

- SITE_CONTENT_DEFAULTS: (key, value, section, description). key가 없을 때만 삽입.
- 나머지 샘플 데이터: 해당 테이블이 비어 있을 때만 삽입.
"""

SITE_CONTENT_DEFAULTS = [
    ("hero_greeting", "Hello!", "hero", "Hero section greeting badge"),
    ("hero_intro", "I'm", "hero", "Text before name"),
    ("hero_subtitle", "Full Stack Developer & AI Enthusiast", "hero", "Hero subtitle/title"),
    ("hero_description", "Passionate about building innovative solutions and exploring cutting-edge technologies.", "hero", "Hero description text"),
    ("hero_btn_portfolio", "Portfolio", "hero", "Portfolio button text"),
    ("hero_btn_hire", "Hire me", "hero", "Hire me button text"),
    ("hero_btn_resume", "Download Resume", "hero", "Download resume button text"),
    ("hero_experience_years", "10", "hero", "Years of experience number"),
    ("hero_experience_label", "Years Experience", "hero", "Experience label text"),
    ("about_badge", "About Me", "about", "About section badge text"),
    ("about_heading", "Get a website that will make a lasting impression on your audience!!!", "about", "About section main heading"),
    ("tech_title", "Tech Stack", "tech", "Tech stack section title"),
    ("tech_items", "Rust,Python,Microsoft,AI,Automation", "tech", "Comma-separated tech items"),
    ("skills_title", "My Skills", "skills", "Skills section title"),
    ("skills_subtitle", "Technologies and tools I work with", "skills", "Skills section subtitle"),
    ("services_title_prefix", "My", "services", "Services title prefix"),
    ("services_title", "Services", "services", "Services section title"),
    ("services_subtitle", "Delivering exceptional digital experiences tailored to your needs", "services", "Services section subtitle"),
    ("hire_title_prefix", "Why", "hire", "Hire title prefix"),
    ("hire_title", "Hire me", "hire", "Hire section title"),
    ("hire_btn", "Hire Me", "hire", "Hire button text"),
    ("stats_experience", "10+", "hire", "Years of experience stat"),
    ("stats_experience_label", "Years of Experience", "hire", "Experience stat label"),
    ("stats_projects", "4K", "hire", "Projects completed stat"),
    ("stats_projects_label", "Projects Completed", "hire", "Projects stat label"),
    ("stats_customers", "12K", "hire", "Happy customers stat"),
    ("stats_customers_label", "Happy Customers", "hire", "Customers stat label"),
    ("process_title_prefix", "Our Work", "process", "Process title prefix"),
    ("process_title", "Process", "process", "Process section title"),
    ("process_subtitle", "A streamlined approach to bringing your ideas to life", "process", "Process section subtitle"),
    ("portfolio_title_prefix", "Look at my", "portfolio", "Portfolio title prefix"),
    ("portfolio_title", "Portfolio", "portfolio", "Portfolio section title"),
    ("portfolio_subtitle", "Some of my recent work", "portfolio", "Portfolio section subtitle"),
    ("portfolio_btn", "View All Projects", "portfolio", "View all projects button"),
    ("cta_title_prefix", "Let's Work", "cta", "CTA title prefix"),
    ("cta_title", "Together", "cta", "CTA section title"),
    ("cta_subtitle", "Have a project in mind? Let's create something amazing together.", "cta", "CTA section subtitle"),
    ("cta_btn", "Get in Touch", "cta", "CTA button text"),
    ("projects_title", "Featured Projects", "projects", "Projects section title"),
    ("projects_subtitle", "Some of my recent work", "projects", "Projects section subtitle"),
    ("projects_btn_view", "View Project", "projects", "View project button text"),
    ("projects_btn_all", "View All Projects", "projects", "View all projects button text"),
    ("blog_title", "Latest Articles", "blog", "Blog section title"),
    ("blog_subtitle", "Thoughts, tutorials, and insights", "blog", "Blog section subtitle"),
    ("blog_btn_read", "Read More", "blog", "Read more button text"),
    ("blog_btn_all", "View All Articles", "blog", "View all articles button text"),
    ("contact_label", "Contact", "contact", "Contact page label"),
    ("contact_title_prefix", "Get in", "contact", "Contact title prefix"),
    ("contact_title", "Touch", "contact", "Contact section title"),
    ("contact_subtitle", "Have a question or want to work together? Feel free to reach out!", "contact", "Contact section subtitle"),
    ("contact_form_title", "Send a Message", "contact", "Contact form title"),
    ("contact_btn", "Send Message", "contact", "Send message button text"),
    ("contact_success", "Thank you! Your message has been sent successfully.", "contact", "Success message after form submission"),
    ("form_name_label", "Name", "form", "Name field label"),
    ("form_name_placeholder", "Your name", "form", "Name field placeholder"),
    ("form_email_label", "Email", "form", "Email field label"),
    ("form_email_placeholder", "your@email.com", "form", "Email field placeholder"),
    ("form_subject_label", "Subject", "form", "Subject field label"),
    ("form_subject_placeholder", "What's this about?", "form", "Subject field placeholder"),
    ("form_message_label", "Message", "form", "Message field label"),
    ("form_message_placeholder", "Your message...", "form", "Message field placeholder"),
    ("roadmap_step1_title", "Concept", "roadmap", "Step 1 title"),
    ("roadmap_step1_desc", "Understanding your vision, goals, and requirements to create a solid foundation.", "roadmap", "Step 1 description"),
    ("roadmap_step2_title", "Design", "roadmap", "Step 2 title"),
    ("roadmap_step2_desc", "Creating beautiful, intuitive interfaces that engage and delight users.", "roadmap", "Step 2 description"),
    ("roadmap_step3_title", "Development", "roadmap", "Step 3 title"),
    ("roadmap_step3_desc", "Building robust, scalable solutions with clean, maintainable code.", "roadmap", "Step 3 description"),
    ("footer_copyright", "© 2024", "footer", "Footer copyright year"),
    ("footer_rights", "All rights reserved.", "footer", "Footer rights text"),
    ("footer_quick_links", "Quick Links", "footer", "Footer quick links title"),
    ("footer_connect", "Connect", "footer", "Footer connect title"),
    ("footer_tagline", "Built with passion using FastAPI", "footer", "Footer tagline"),
    ("education_label", "Learning", "education", "Education section label"),
    ("education_title", "Education", "education", "Education section title"),
    ("experience_label", "Career", "experience", "Experience section label"),
    ("experience_title_prefix", "Work", "experience", "Experience title prefix"),
    ("experience_title", "Experience", "experience", "Experience section title"),
    ("skills_label", "Expertise", "skills", "Skills section label"),
    ("skills_title_prefix", "Technical", "skills", "Skills title prefix"),
    ("about_label", "Introduction", "about", "About page label"),
    ("about_title_prefix", "About", "about", "About page title prefix"),
    ("about_title", "Me", "about", "About page title"),
    ("about_subtitle", "Get to know more about my background, skills, and experience", "about", "About page subtitle"),
    ("about_experience_years", "5+", "about", "Years of experience badge"),
    ("about_experience_label", "Years Experience", "about", "Experience badge label"),
    ("about_resume_btn", "Download Resume", "about", "Download resume button text"),
    ("about_contact_btn", "Contact Me", "about", "Contact me button text"),
    ("nav_home", "Home", "nav", "Home navigation link"),
    ("nav_about", "About", "nav", "About navigation link"),
    ("nav_projects", "Projects", "nav", "Projects navigation link"),
    ("nav_blog", "Blog", "nav", "Blog navigation link"),
    ("nav_contact", "Contact", "nav", "Contact navigation link"),
]

DEFAULT_PROFILE = {
    "name": "Md Jobayer Arafat",
    "title": "Full Stack Developer & AI Enthusiast",
    "bio": (
        "Passionate software developer with expertise in web development, machine learning, "
        "and building innovative solutions. I love creating efficient, scalable applications "
        "and exploring cutting-edge technologies."
    ),
    "email": "jobayerarafat@example.com",
    "phone": "+880 1234567890",
    "location": "Bangladesh",
    "github_url": "https://github.com/mdjobayerarafat",
    "linkedin_url": "https://linkedin.com/in/mdjobayerarafat",
    "twitter_url": "https://twitter.com/mdjobayerarafat",
    "resume_url": "/static/resume.pdf",
    "avatar_url": "/static/avatar.jpg",
}

# (name, category, proficiency, icon)
DEFAULT_SKILLS = [
    ("Rust", "Backend", 85, "🦀"),
    ("Python", "Backend", 90, "🐍"),
    ("JavaScript", "Frontend", 88, "📜"),
    ("TypeScript", "Frontend", 85, "💙"),
    ("React", "Frontend", 82, "⚛️"),
    ("Node.js", "Backend", 85, "💚"),
    ("PostgreSQL", "Database", 80, "🐘"),
    ("SQLite", "Database", 85, "📦"),
    ("Docker", "DevOps", 78, "🐳"),
    ("Git", "Tools", 90, "📚"),
    ("Linux", "Tools", 85, "🐧"),
    ("Machine Learning", "AI/ML", 80, "🤖"),
]

DEFAULT_PROJECTS = [
    {
        "title": "Portfolio Website",
        "slug": "portfolio-website",
        "description": "A modern portfolio website built with FastAPI and Tailwind CSS",
        "content": (
            "## Overview\n\nThis portfolio website showcases my projects, skills, and blog posts. "
            "Built with modern technologies for optimal performance.\n\n## Features\n\n"
            "- Responsive dark theme design\n- Admin panel for content management\n"
            "- Blog with markdown support\n- Project showcase\n- Contact form"
        ),
        "image_url": "/static/images/portfolio.jpg",
        "demo_url": "https://example.com",
        "github_url": "https://github.com/mdjobayerarafat/portfolio",
        "technologies": "Python, FastAPI, SQLite, Tailwind CSS, Jinja2",
        "featured": True,
    },
    {
        "title": "AI Chat Application",
        "slug": "ai-chat-app",
        "description": "An intelligent chat application powered by machine learning",
        "content": (
            "## Overview\n\nA real-time chat application with AI-powered responses and natural "
            "language processing capabilities.\n\n## Features\n\n- Real-time messaging\n"
            "- AI-powered responses\n- Natural language understanding\n- Multi-language support"
        ),
        "image_url": "/static/images/ai-chat.jpg",
        "demo_url": "https://example.com/chat",
        "github_url": "https://github.com/mdjobayerarafat/ai-chat",
        "technologies": "Python, FastAPI, React, TensorFlow, WebSocket",
        "featured": True,
    },
]

DEFAULT_BLOGS = [
    {
        "title": "Getting Started with FastAPI Web Development",
        "slug": "getting-started-fastapi-web",
        "excerpt": "Learn how to build fast and reliable web applications using Python and FastAPI.",
        "content": (
            "## Introduction\n\nFastAPI is a modern Python web framework built on type hints. "
            "In this blog post, we'll explore how to build web applications with it.\n\n"
            "## Why FastAPI?\n\n- Async support out of the box\n- Automatic request validation\n"
            "- Interactive API docs\n- Great performance\n\n## Setting Up\n\n"
            "First, install FastAPI and an ASGI server:\n\n```bash\npip install fastapi uvicorn\n```\n\n"
            "## Creating Your First App\n\nCreate a new module and declare your first route..."
        ),
        "image_url": "/static/images/fastapi-blog.jpg",
        "tags": "Python, Web Development, FastAPI",
        "published": True,
    },
    {
        "title": "Building Modern UIs with Tailwind CSS",
        "slug": "modern-ui-tailwind-css",
        "excerpt": "Discover how Tailwind CSS can speed up your frontend development with utility-first approach.",
        "content": (
            "## What is Tailwind CSS?\n\nTailwind CSS is a utility-first CSS framework that allows you "
            "to build custom designs without leaving your HTML.\n\n## Benefits\n\n"
            "- No need to write custom CSS\n- Consistent design system\n"
            "- Responsive design made easy\n- Dark mode support\n\n## Getting Started\n\n"
            "Install Tailwind via npm:\n\n```bash\nnpm install -D tailwindcss\nnpx tailwindcss init\n```\n\n"
            "## Building Components\n\nCreate beautiful components with utility classes..."
        ),
        "image_url": "/static/images/tailwind-blog.jpg",
        "tags": "CSS, Tailwind, Frontend",
        "published": True,
    },
]

DEFAULT_EXPERIENCE = [
    {
        "company": "Tech Company",
        "position": "Senior Software Developer",
        "description": "Building scalable web applications and leading development teams.",
        "start_date": "2022-01",
        "end_date": None,
        "current": True,
    },
    {
        "company": "Startup Inc",
        "position": "Full Stack Developer",
        "description": "Developed full-stack applications using modern technologies.",
        "start_date": "2020-06",
        "end_date": "2022-01",
        "current": False,
    },
]

DEFAULT_EDUCATION = [
    {
        "institution": "University of Technology",
        "degree": "Bachelor of Science",
        "field": "Computer Science and Engineering",
        "start_date": "2016",
        "end_date": "2020",
        "description": "Focused on software engineering and machine learning.",
    },
]

DEFAULT_SERVICES = [
    {
        "name": "UI/UX Design",
        "description": "Creating beautiful and intuitive user interfaces with modern design principles.",
        "image_url": "",
        "icon": "🎨",
        "order_index": 1,
    },
    {
        "name": "Web Design",
        "description": "Building responsive, modern websites that look great on all devices.",
        "image_url": "",
        "icon": "🌐",
        "order_index": 2,
    },
    {
        "name": "Landing Page Design",
        "description": "High-converting landing pages designed to maximize your business goals.",
        "image_url": "",
        "icon": "📄",
        "order_index": 3,
    },
]
