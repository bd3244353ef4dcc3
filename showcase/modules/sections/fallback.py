# Shown when the backend cannot be reached

FALLBACK_SKILL_CATEGORIES = [
    {
        'icon': 'Brain',
        'title': 'AI & Data Science',
        'skills': ['NLP', 'Scikit-Learn', 'Machine Learning', 'Data Analysis', 'Predictive Modeling'],
        'color': 'primary',
        'order': 1,
    },
    {
        'icon': 'Code2',
        'title': 'Programming & Tech',
        'skills': ['Python', 'RPA', 'Azure', 'Linux', 'API Development'],
        'color': 'secondary',
        'order': 2,
    },
    {
        'icon': 'Users',
        'title': 'Leadership & Strategy',
        'skills': ['Strategic Planning', 'Team Management', 'Organizational Development', 'Project Management'],
        'color': 'primary',
        'order': 3,
    },
    {
        'icon': 'Megaphone',
        'title': 'Public Speaking',
        'skills': ['Conference Speaking', 'Workshop Facilitation', 'Entrepreneurship Training', 'Mentoring'],
        'color': 'secondary',
        'order': 4,
    },
    {
        'icon': 'Database',
        'title': 'Consulting',
        'skills': ['Business Strategy', 'Process Optimization', 'Digital Transformation', 'Innovation Management'],
        'color': 'primary',
        'order': 5,
    },
    {
        'icon': 'Cloud',
        'title': 'Technology Stack',
        'skills': ['Cloud Computing', 'Automation', 'Integration', 'Scalable Solutions'],
        'color': 'secondary',
        'order': 6,
    },
]

FALLBACK_MEDIA = [
    {
        'image': '/static/media/podcast-pemmasani.png',
        'title': 'Podcast with Pemmasani Chandra Shekhar',
        'description': 'Engaging conversation with Guntur MP on leadership and governance',
        'type': 'Podcast',
        'icon': 'Mic',
        'link': 'https://youtu.be/sZ8u-TqG6Tw?si=fEWXtRAtEbibvDnM',
        'order': 1,
        'isActive': True,
    },
    {
        'image': '/static/media/sweep-event.png',
        'title': 'SWEEP Electoral Education Event',
        'description': 'Speaking at systematic voters education and electoral participation program',
        'type': 'Speaking',
        'icon': 'Camera',
        'link': 'https://www.instagram.com/reel/C6FYmBNIEi_/?igsh=MTJ6dHM1aXVzZXJzbA==',
        'order': 2,
        'isActive': True,
    },
    {
        'image': '/static/media/leadership-content.png',
        'title': 'Leadership Content Creation',
        'description': 'Creating engaging content on youth empowerment and innovation',
        'type': 'Content',
        'icon': 'Award',
        'link': 'https://www.instagram.com/reel/C62kktFrqyA/?igsh=MWxvbnp0djBnbjZ3cg==',
        'order': 3,
        'isActive': True,
    },
    {
        'image': '/static/media/panel-discussion.png',
        'title': 'Panel Discussion Leadership',
        'description': 'Leading strategic discussions on innovation and community development',
        'type': 'Panel',
        'icon': 'Mic',
        'link': 'https://www.instagram.com/reel/C6YvX4MNkwE/?igsh=MXYyYzM5dXhvZm5xaw==',
        'order': 4,
        'isActive': True,
    },
]

CONTACT_METHODS = [
    {
        'title': 'LinkedIn',
        'description': 'Connect professionally',
        'action': 'Visit Profile',
        'href': 'https://www.linkedin.com/in/venkat-kalyan-4239ba21a/',
        'color': 'primary',
    },
    {
        'title': 'Speaking Engagements',
        'description': 'Book for conferences & events',
        'action': 'Schedule Call',
        'href': 'https://wa.me/917661073573?text=Hi%20J%20V%20Kalyan,%20I%20would%20like%20to%20discuss%20a%20speaking%20engagement%20opportunity.',
        'color': 'secondary',
    },
    {
        'title': 'Consultation',
        'description': 'Strategic & technical guidance',
        'action': 'Get in Touch',
        'href': 'https://wa.me/917661073573?text=Hi%20J%20V%20Kalyan,%20I%20would%20like%20to%20discuss%20a%20consultation.',
        'color': 'primary',
    },
]
