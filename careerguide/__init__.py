"""CareerGuide: career assessment and roadmap service"""
