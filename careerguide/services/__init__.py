"""Business logic: question flow, role catalog and resolution, assessment engine, stores"""
