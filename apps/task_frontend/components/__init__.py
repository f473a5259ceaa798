"""
Frontend components
Each component is a Blueprint plus the service behind it, registered via init_*().
"""
