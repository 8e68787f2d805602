# Tool definitions package: general
