"""
Constants shared by the vehicle packages and the demo driver.
"""

# Narration verbs, printed as "<verb> <name>"
ACCELERATE_VERB = "accelerate"
STOP_VERB = "stop"
START_MOTOR_VERB = "starting motor"

# Operation name reported when a vehicle cannot start a motor
START_MOTOR_OPERATION = "start_motor"

# Demo fleet
COMBUSTION_DEMO_NAME = "Suv Nissan"
ELECTRIC_DEMO_NAME = "Tesla"
BICYCLE_DEMO_NAME = "BMX Bike"
