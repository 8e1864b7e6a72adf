"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request
        
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    
    return {
        'user_ip': user_ip,
        'user_agent': str(getattr(request_obj, 'user_agent', '') or '') or None
    }


def normalize_word(word: str) -> str:
    """Canonical form used for every comparison: stripped and uppercase."""
    return word.strip().upper()
