from .base_helper import BaseHelper
