# Clinic records package
