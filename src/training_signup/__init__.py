"""Training Signup - internal training registration form and HR dashboard"""
