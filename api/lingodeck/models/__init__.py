"""
Models package. See lingodeck.models.models for the aggregated imports.
"""
