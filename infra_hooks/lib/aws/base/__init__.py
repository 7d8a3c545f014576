from .aws_helper import AWSHelper
