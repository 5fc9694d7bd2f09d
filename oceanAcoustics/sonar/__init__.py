# -- Sonar Subpackage -- #

'''
Sonar equations, source and band levels, spreading loss and target strength.
'''

from oceanAcoustics.sonar.sonarEquation import basicActiveSonarEquation, basicPassiveSonarEquation, detectionIndex
