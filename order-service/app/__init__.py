# Order Pricing Service
